"""
Engagement scoring for Learning Portfolio.

Provides pure, side-effect-free functions to:
1. Weigh a single engagement type
2. Sum the weights of a set of learning moments
3. Measure how long a set of moments spans
4. Combine both into a category's depth

All functions are deterministic and do not mutate input data. They accept any
iterable of LearningMoment, so a caller can use weighted_score() alone
without going through the ranker.
"""

from dataclasses import dataclass
from typing import Iterable

from portfolio.models.learning_moment import EngagementType, LearningMoment
from portfolio.scoring.weights import ENGAGEMENT_WEIGHTS, DAYS_PER_MONTH


class InvalidArgument(ValueError):
    """An input outside the closed domain of a scoring function."""


# =============================================================================
# Result Data Structures
# =============================================================================

@dataclass(frozen=True)
class EngagementScore:
    """
    Score breakdown for a set of learning moments.

    Attributes:
        weighted_score: Sum of per-moment weights.
        time_span_days: Days between earliest and latest moment.
        depth: weighted_score + time_span_days / DAYS_PER_MONTH.
    """
    weighted_score: int
    time_span_days: int
    depth: float


# =============================================================================
# Scoring Functions
# =============================================================================

def weight(engagement_type: EngagementType) -> int:
    """
    Return the fixed weight of an engagement type.

    Accepts an EngagementType member or its string value.

    Raises:
        InvalidArgument: For any value outside the enumeration. This points
            at bad data upstream and is never defaulted.

    Example:
        >>> weight(EngagementType.APPLIED)
        3
    """
    try:
        key = EngagementType(engagement_type)
    except ValueError:
        raise InvalidArgument(f"unknown engagement type: {engagement_type!r}") from None
    return ENGAGEMENT_WEIGHTS[key]


def weighted_score(events: Iterable[LearningMoment]) -> int:
    """
    Sum of weights over all moments.

    Returns 0 for an empty set. Order of the moments does not matter.
    """
    return sum(weight(event.engagement_type) for event in events)


def time_span_days(events: Iterable[LearningMoment]) -> int:
    """
    Whole days between the earliest and latest moment.

    Fewer than two moments always span 0 days. Several moments on the same
    extreme date do not change the result.

    Example:
        Moments on 2024-01-01 and 2024-01-11 span 10 days.
    """
    dates = [event.occurred_at for event in events]
    if len(dates) < 2:
        return 0
    return (max(dates) - min(dates)).days


def depth(events: Iterable[LearningMoment]) -> float:
    """
    Combined depth of a set of moments.

    Formula:
        depth = weighted_score + time_span_days / DAYS_PER_MONTH

    The span term rewards sustained engagement: a month of activity is worth
    about as much as one consumed item.

    Returns 0.0 for an empty set.
    """
    return score_events(events).depth


def score_events(events: Iterable[LearningMoment]) -> EngagementScore:
    """
    Compute the full score breakdown in one pass over the input.

    Args:
        events: Learning moments of a single category.

    Returns:
        EngagementScore with weighted score, time span and depth.
    """
    events = list(events)
    total = weighted_score(events)
    span = time_span_days(events)
    return EngagementScore(
        weighted_score=total,
        time_span_days=span,
        depth=total + span / DAYS_PER_MONTH,
    )


def engagement_types_present(events: Iterable[LearningMoment]) -> list[EngagementType]:
    """Distinct engagement types among the moments, shallowest first."""
    present = {EngagementType(event.engagement_type) for event in events}
    return [t for t in ENGAGEMENT_WEIGHTS if t in present]
