"""
Learning item model.

A LearningItem is an entry in the public skills catalogue: something being
learned, with a proficiency status, grouped under a free-text category.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class LearningStatus(str, Enum):
    """Proficiency reached with an item, least proficient first."""

    LEARNING = "learning"
    PRACTICING = "practicing"
    COMFORTABLE = "comfortable"
    EXPERT = "expert"

    def __str__(self) -> str:
        return self.value


@dataclass
class LearningItem:
    """
    A catalogue entry shown on the learning items page.

    Attributes:
        name: Item name (required).
        category: Grouping label (required), e.g. "Languages".
        status: Current proficiency.
        item_id: Identifier used by the detail page; assigned by storage.
        icon: Optional icon name or emoji.
        description: Short summary.
        started_at: When learning started.
        resources: Links or titles of material used.
        notes: Free text.
        projects: Projects the item was used in.
        position: Manual display order.
    """

    name: str
    category: str
    status: LearningStatus = LearningStatus.LEARNING
    item_id: Optional[int] = None
    icon: str = ""
    description: str = ""
    started_at: Optional[date] = None
    resources: list[str] = field(default_factory=list)
    notes: str = ""
    projects: list[str] = field(default_factory=list)
    position: int = 0

    def __post_init__(self) -> None:
        errors = []

        if not isinstance(self.name, str) or not self.name.strip():
            errors.append("name is required and cannot be empty")

        if not isinstance(self.category, str) or not self.category.strip():
            errors.append("category is required and cannot be empty")

        if self.status is None or self.status == "":
            errors.append("status is required")
        elif not isinstance(self.status, LearningStatus):
            try:
                self.status = LearningStatus(self.status)
            except ValueError:
                errors.append(f"status must be one of "
                              f"{[s.value for s in LearningStatus]}, got {self.status!r}")

        if self.item_id is not None and (
            not isinstance(self.item_id, int) or isinstance(self.item_id, bool)
        ):
            errors.append(f"item_id must be an integer, got {self.item_id!r}")

        if isinstance(self.started_at, datetime):
            self.started_at = self.started_at.date()
        elif self.started_at == "":
            self.started_at = None
        elif isinstance(self.started_at, str):
            try:
                self.started_at = date.fromisoformat(self.started_at[:10])
            except ValueError:
                errors.append(f"started_at is not a valid date: {self.started_at!r}")
        elif self.started_at is not None and not isinstance(self.started_at, date):
            errors.append(f"started_at must be a date or ISO string, got {self.started_at!r}")

        for label in ("icon", "description", "notes"):
            if not isinstance(getattr(self, label), str):
                errors.append(f"{label} must be a string")

        for label in ("resources", "projects"):
            value = getattr(self, label)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                errors.append(f"{label} must be a list of strings, got {value!r}")

        if not isinstance(self.position, int) or isinstance(self.position, bool):
            errors.append(f"position must be an integer, got {self.position!r}")

        if errors:
            raise ValueError(f"LearningItem validation failed: {'; '.join(errors)}")

    def to_dict(self) -> dict:
        return {
            "id": self.item_id,
            "name": self.name,
            "category": self.category,
            "status": self.status.value,
            "icon": self.icon,
            "description": self.description,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "resources": list(self.resources),
            "notes": self.notes,
            "projects": list(self.projects),
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LearningItem":
        """Create a LearningItem from a seed record."""
        return cls(
            name=data.get("name"),
            category=data.get("category"),
            status=data.get("status", LearningStatus.LEARNING),
            item_id=data.get("id"),
            icon=data.get("icon") or "",
            description=data.get("description") or "",
            started_at=data.get("started_at"),
            resources=data.get("resources") or [],
            notes=data.get("notes") or "",
            projects=data.get("projects") or [],
            position=int(data.get("position", 0)),
        )

    def __str__(self) -> str:
        return f"{self.name} [{self.status.value}]"
