"""
Podcast module.

Episode queries and category display metadata.
"""

from portfolio.podcast.catalog import (
    ALL_EPISODES_SLUG,
    CATEGORY_META,
    category_meta,
    published_episodes,
    latest_episode,
    episode_counts,
)

__all__ = [
    "ALL_EPISODES_SLUG",
    "CATEGORY_META",
    "category_meta",
    "published_episodes",
    "latest_episode",
    "episode_counts",
]
