"""
Scoring module.

Derives per-category depth from learning moments and ranks categories for display.
"""

from portfolio.scoring.weights import (
    ENGAGEMENT_WEIGHTS,
    DAYS_PER_MONTH,
    get_all_engagement_types,
)

from portfolio.scoring.scorer import (
    InvalidArgument,
    EngagementScore,
    weight,
    weighted_score,
    time_span_days,
    depth,
    score_events,
    engagement_types_present,
)

from portfolio.scoring.ranker import (
    DEFAULT_MAX_DEPTH,
    RankedCategory,
    annotate,
    rank_active_categories,
    portfolio_overview,
    max_depth,
    drip_percent,
)

__all__ = [
    # Weight table
    "ENGAGEMENT_WEIGHTS",
    "DAYS_PER_MONTH",
    "get_all_engagement_types",
    # Scoring functions
    "InvalidArgument",
    "EngagementScore",
    "weight",
    "weighted_score",
    "time_span_days",
    "depth",
    "score_events",
    "engagement_types_present",
    # Ranking
    "DEFAULT_MAX_DEPTH",
    "RankedCategory",
    "annotate",
    "rank_active_categories",
    "portfolio_overview",
    "max_depth",
    "drip_percent",
]
