"""
Data models module.

Defines learning moments, categories, learning items and podcast episodes.
"""

from portfolio.models.learning_moment import EngagementType, LearningMoment
from portfolio.models.category import Category
from portfolio.models.learning_item import LearningItem, LearningStatus
from portfolio.models.podcast import PodcastCategory, PodcastEpisode, slugify

__all__ = [
    "EngagementType",
    "LearningMoment",
    "Category",
    "LearningItem",
    "LearningStatus",
    "PodcastCategory",
    "PodcastEpisode",
    "slugify",
]
