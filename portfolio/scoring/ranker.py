"""
Portfolio ranking for Learning Portfolio.

Selects and orders the categories shown on the landing pages:

    categories -> drop empty -> most recent moment desc (name asc) -> first N

Every selected category is annotated with its depth so templates can size
its drip relative to max_depth() of the same population.

All functions are pure: no I/O, no retained references to mutable state.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from portfolio.config import config as settings
from portfolio.models.category import Category
from portfolio.scoring.scorer import InvalidArgument, score_events


# Normalization basis used when there is nothing to normalize against
DEFAULT_MAX_DEPTH: float = 1.0


@dataclass(frozen=True)
class RankedCategory:
    """
    A category with its precomputed scores.

    Attributes:
        category: The category itself.
        depth: Combined depth score.
        weighted_score: Sum of moment weights.
        time_span_days: Days between first and last moment.
        most_recent_occurred_at: Date of the latest moment (None if empty).
    """
    category: Category
    depth: float
    weighted_score: int
    time_span_days: int
    most_recent_occurred_at: Optional[date]

    @property
    def name(self) -> str:
        return self.category.name

    @property
    def event_count(self) -> int:
        return len(self.category.events)

    def to_dict(self, max_depth: Optional[float] = None) -> dict:
        data = {
            "name": self.name,
            "position": self.category.position,
            "depth": round(self.depth, 4),
            "weighted_score": self.weighted_score,
            "time_span_days": self.time_span_days,
            "event_count": self.event_count,
            "most_recent_occurred_at": (
                self.most_recent_occurred_at.isoformat() if self.most_recent_occurred_at else None
            ),
            "engagement_types": [t.value for t in self.category.engagement_types_present],
        }
        if max_depth is not None:
            data["percent"] = round(drip_percent(self.depth, max_depth), 1)
        return data


def annotate(category: Category) -> RankedCategory:
    """Compute the scores of a single category."""
    score = score_events(category.events)
    return RankedCategory(
        category=category,
        depth=score.depth,
        weighted_score=score.weighted_score,
        time_span_days=score.time_span_days,
        most_recent_occurred_at=category.most_recent_occurred_at,
    )


def rank_active_categories(
    categories: Iterable[Category],
    limit: Optional[int] = None,
) -> list[RankedCategory]:
    """
    Pick the most recently engaged categories for the home page.

    Steps:
    1. Drop categories without any moments, whatever their position
    2. Sort by most recent moment date, newest first
    3. Break ties by name ascending so output is reproducible
    4. Keep the first `limit` (all of them if fewer qualify)

    Args:
        categories: Categories with their moments loaded, in any order.
        limit: Maximum number of categories to return. None means the
            HOME_CATEGORY_LIMIT setting, read at call time.

    Returns:
        Ranked categories, at most `limit` long. Empty when none qualify.

    Raises:
        InvalidArgument: If limit is negative.
    """
    if limit is None:
        limit = settings.HOME_CATEGORY_LIMIT
    if limit < 0:
        raise InvalidArgument(f"limit cannot be negative, got {limit}")

    active = [annotate(c) for c in categories if c.events]

    # Two stable passes: secondary key first, then primary.
    active.sort(key=lambda r: r.name)
    active.sort(key=lambda r: r.most_recent_occurred_at, reverse=True)

    return active[:limit]


def portfolio_overview(categories: Iterable[Category]) -> list[RankedCategory]:
    """
    Every category in manual display order, empty ones included.

    Ordered by position, then name.
    """
    ordered = sorted(categories, key=lambda c: (c.position, c.name))
    return [annotate(c) for c in ordered]


def max_depth(categories: Iterable[Union[Category, RankedCategory]]) -> float:
    """
    Largest depth in the given population.

    Pass exactly the population being rendered so that no drip exceeds its
    own normalization basis. Returns DEFAULT_MAX_DEPTH (1.0) when the
    population is empty or every depth is zero.
    """
    depths = [
        c.depth if isinstance(c, RankedCategory) else annotate(c).depth
        for c in categories
    ]
    if not depths or max(depths) <= 0:
        return DEFAULT_MAX_DEPTH
    return max(depths)


def drip_percent(depth: float, max_depth: float) -> float:
    """
    Depth as a percentage of max_depth, clamped to 0-100.

    A non-positive basis yields 0.0 instead of dividing by zero.
    """
    if max_depth <= 0:
        return 0.0
    return max(0.0, min(100.0, depth / max_depth * 100.0))
