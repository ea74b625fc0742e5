"""
Learning moment model.

A LearningMoment is a single dated record of engaging with a topic. It is the
engagement event the scoring module aggregates per category.
"""

from dataclasses import dataclass, asdict
from datetime import date, datetime
from enum import Enum
from typing import Optional


class EngagementType(str, Enum):
    """How deeply a topic was engaged with, shallowest first."""

    CONSUMED = "consumed"
    EXPERIMENTED = "experimented"
    APPLIED = "applied"
    SHARED = "shared"

    def __str__(self) -> str:
        return self.value


def _coerce_date(value) -> Optional[date]:
    """Reduce datetimes and ISO strings to a plain date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError(f"cannot interpret {value!r} as a date")


@dataclass(frozen=True)
class LearningMoment:
    """
    A single engagement event within a category.

    Instances are immutable: edits produce a new moment, and the scorer only
    ever sees the current snapshot.

    Attributes:
        engagement_type: How the topic was engaged with.
        occurred_at: Calendar date of the engagement (no time of day).
        description: Free text shown in listings.
        url: Optional link to the material.
        category_name: Name of the owning category, if known.
    """

    engagement_type: EngagementType
    occurred_at: date
    description: str = ""
    url: Optional[str] = None
    category_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Coerce loose input and validate required fields."""
        errors = []

        engagement_type = self.engagement_type
        if engagement_type is None or engagement_type == "":
            errors.append("engagement_type is required")
        elif not isinstance(engagement_type, EngagementType):
            try:
                object.__setattr__(self, "engagement_type", EngagementType(engagement_type))
            except ValueError:
                errors.append(f"engagement_type must be one of "
                              f"{[t.value for t in EngagementType]}, got {engagement_type!r}")

        try:
            occurred_at = _coerce_date(self.occurred_at)
        except (TypeError, ValueError) as e:
            errors.append(f"occurred_at is not a valid date: {e}")
        else:
            if occurred_at is None:
                errors.append("occurred_at is required")
            else:
                object.__setattr__(self, "occurred_at", occurred_at)

        if not isinstance(self.description, str):
            errors.append(f"description must be a string, got {type(self.description).__name__}")

        if self.url is not None and not isinstance(self.url, str):
            errors.append(f"url must be a string, got {type(self.url).__name__}")
        elif self.url and not (self.url.startswith("http://") or self.url.startswith("https://")):
            errors.append(f"url must start with http:// or https://, got {self.url}")

        if errors:
            raise ValueError(f"LearningMoment validation failed: {'; '.join(errors)}")

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        data = asdict(self)
        data["engagement_type"] = self.engagement_type.value
        data["occurred_at"] = self.occurred_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "LearningMoment":
        """Create a LearningMoment from a dictionary (e.g. a seed file)."""
        return cls(
            engagement_type=data.get("engagement_type"),
            occurred_at=data.get("occurred_at"),
            description=data.get("description") or "",
            url=data.get("url") or None,
            category_name=data.get("category_name"),
        )

    def __str__(self) -> str:
        return f"[{self.engagement_type.value}] {self.description} ({self.occurred_at.isoformat()})"
