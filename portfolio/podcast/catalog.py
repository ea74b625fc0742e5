"""
Podcast catalogue helpers.

Pure functions over already-loaded episodes, plus display metadata for the
podcast categories.
"""

from collections import Counter
from datetime import date
from typing import Iterable, Optional

from portfolio.models.podcast import PodcastEpisode


# Slug used for the pseudo-category listing every episode
ALL_EPISODES_SLUG = "all"

CATEGORY_META: dict[str, dict[str, str]] = {
    "software-practices": {
        "description": "Coding patterns, architecture, and development workflows.",
        "icon": "🛠️",
        "color": "#F97316",
    },
    "teams-and-collaboration": {
        "description": "How teams communicate, align, and ship together.",
        "icon": "🤝",
        "color": "#22C55E",
    },
    "career-and-learning": {
        "description": "Growth, mentorship, and navigating a dev career.",
        "icon": "🌱",
        "color": "#3B82F6",
    },
    "tech-meets-business": {
        "description": "Where engineering decisions meet product and strategy.",
        "icon": "📈",
        "color": "#8B5CF6",
    },
    "technology-deep-dives": {
        "description": "Going deep on tools, frameworks, and technical concepts.",
        "icon": "🧪",
        "color": "#E85D75",
    },
    ALL_EPISODES_SLUG: {
        "description": "Every episode, all in one place.",
        "icon": "🎧",
        "color": "#fe5f00",
    },
}

DEFAULT_CATEGORY_META: dict[str, str] = {"description": "", "icon": "🎤", "color": "#fe5f00"}


def category_meta(slug: str) -> dict[str, str]:
    """Display metadata for a podcast category slug (defaults for unknown slugs)."""
    return dict(CATEGORY_META.get(slug, DEFAULT_CATEGORY_META))


def published_episodes(
    episodes: Iterable[PodcastEpisode],
    today: Optional[date] = None,
    category_slug: Optional[str] = None,
) -> list[PodcastEpisode]:
    """
    Published episodes, newest first.

    Args:
        episodes: Episodes in any order.
        today: Reference date (default: today).
        category_slug: Restrict to one category; "all" or None means every episode.
    """
    selected = [e for e in episodes if e.is_published(today)]
    if category_slug and category_slug != ALL_EPISODES_SLUG:
        selected = [e for e in selected if category_slug in e.category_slugs]
    return sorted(selected, key=lambda e: (e.published_at, e.episode_number), reverse=True)


def latest_episode(
    episodes: Iterable[PodcastEpisode],
    today: Optional[date] = None,
) -> Optional[PodcastEpisode]:
    """The newest published episode, or None."""
    published = published_episodes(episodes, today)
    return published[0] if published else None


def episode_counts(
    episodes: Iterable[PodcastEpisode],
    today: Optional[date] = None,
) -> dict[str, int]:
    """Number of published episodes per category slug."""
    counts: Counter = Counter()
    for episode in published_episodes(episodes, today):
        counts.update(set(episode.category_slugs))
    return dict(counts)
