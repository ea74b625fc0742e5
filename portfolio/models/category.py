"""
Category model.

A Category owns its learning moments exclusively. Score-related values are
derived on demand from the current moments and never stored.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from portfolio.models.learning_moment import EngagementType, LearningMoment


@dataclass
class Category:
    """
    A learning category (e.g. "Testing", "Agile").

    Attributes:
        name: Unique, non-empty name.
        position: Manual display order, independent of score.
        events: Learning moments owned by this category.
    """

    name: str
    position: int = 0
    events: list[LearningMoment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate required fields.

        Raises:
            ValueError: If validation fails.
        """
        errors = []

        if not isinstance(self.name, str) or not self.name.strip():
            errors.append("name is required and cannot be empty")

        if not isinstance(self.position, int) or isinstance(self.position, bool):
            errors.append(f"position must be an integer, got {self.position!r}")

        for event in self.events:
            if not isinstance(event, LearningMoment):
                errors.append(f"events must be LearningMoment instances, got {type(event).__name__}")
                break

        if errors:
            raise ValueError(f"Category validation failed: {'; '.join(errors)}")

    # Derived values. Imported lazily: the scoring package depends on models.

    @property
    def weighted_score(self) -> int:
        from portfolio.scoring.scorer import weighted_score
        return weighted_score(self.events)

    @property
    def time_span_days(self) -> int:
        from portfolio.scoring.scorer import time_span_days
        return time_span_days(self.events)

    @property
    def depth(self) -> float:
        from portfolio.scoring.scorer import depth
        return depth(self.events)

    @property
    def engagement_types_present(self) -> list[EngagementType]:
        from portfolio.scoring.scorer import engagement_types_present
        return engagement_types_present(self.events)

    @property
    def most_recent_occurred_at(self) -> Optional[date]:
        """Date of the latest moment, or None when there are none."""
        if not self.events:
            return None
        return max(event.occurred_at for event in self.events)

    @property
    def event_count(self) -> int:
        return len(self.events)

    def chronological_events(self) -> list[LearningMoment]:
        """Moments oldest first."""
        return sorted(self.events, key=lambda e: e.occurred_at)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "position": self.position,
            "events": [event.to_dict() for event in self.chronological_events()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        name = data.get("name")
        events = [
            LearningMoment.from_dict({**raw, "category_name": name})
            for raw in data.get("events", [])
        ]
        return cls(name=name, position=int(data.get("position", 0)), events=events)

    def __str__(self) -> str:
        return f"{self.name} ({len(self.events)} moments)"
