"""
Engagement weight table for Learning Portfolio.

This file is the single source of truth for how much each kind of engagement
counts towards a category's depth.

The table is a policy constant, not configuration. Scores are recomputed on
every read, so changing a weight changes every historical score as well;
there is no versioning of past values.
"""

from portfolio.models.learning_moment import EngagementType


# =============================================================================
# Engagement Weights
# =============================================================================

# Deeper engagement counts more. Consuming material is the baseline.
ENGAGEMENT_WEIGHTS: dict[EngagementType, int] = {
    EngagementType.CONSUMED: 1,
    EngagementType.EXPERIMENTED: 2,
    EngagementType.APPLIED: 3,
    EngagementType.SHARED: 4,
}


# =============================================================================
# Time Span Normalization
# =============================================================================

# Divisor turning a day count into "months of sustained engagement", which
# puts the time span on roughly the same scale as the per-moment weights.
DAYS_PER_MONTH: float = 30.0


def get_all_engagement_types() -> list[EngagementType]:
    """All engagement types, shallowest first."""
    return list(ENGAGEMENT_WEIGHTS.keys())
