"""
Pytest Configuration and Fixtures

This module provides:
- Project root on sys.path so `portfolio`, `web` and `main` import
- Shared factories for learning moments and categories
- A seeded in-memory storage
- Test category markers
"""

import pytest
import sys
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from portfolio.models import (
    Category,
    LearningItem,
    LearningMoment,
    PodcastCategory,
    PodcastEpisode,
)
from portfolio.storage import InMemoryStorage


# Fixed reference date so day arithmetic never depends on the clock
TODAY = date(2024, 6, 30)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def today():
    """Reference date used across tests."""
    return TODAY


@pytest.fixture
def make_moment():
    """Factory for LearningMoment with sensible defaults."""
    def _make(engagement_type="consumed", occurred_at=TODAY, description="Read something", **kwargs):
        return LearningMoment(
            engagement_type=engagement_type,
            occurred_at=occurred_at,
            description=description,
            **kwargs,
        )
    return _make


@pytest.fixture
def make_category(make_moment):
    """
    Factory for Category.

    `last_days_ago` adds a single consumed moment that many days before TODAY.
    """
    def _make(name, position=0, events=None, last_days_ago=None):
        if events is None:
            events = []
        if last_days_ago is not None:
            events = list(events) + [make_moment(occurred_at=TODAY - timedelta(days=last_days_ago))]
        return Category(name=name, position=position, events=events)
    return _make


@pytest.fixture
def sample_categories(make_moment):
    """Five active categories and one empty one."""
    return [
        Category(name="Agile", position=1, events=[
            make_moment("consumed", TODAY - timedelta(days=100)),
            make_moment("applied", TODAY - timedelta(days=40)),
            make_moment("shared", TODAY - timedelta(days=5)),
        ]),
        Category(name="Testing", position=2, events=[
            make_moment("experimented", TODAY - timedelta(days=1)),
        ]),
        Category(name="Rust", position=3, events=[
            make_moment("consumed", TODAY - timedelta(days=20)),
        ]),
        Category(name="Architecture", position=4, events=[
            make_moment("applied", TODAY - timedelta(days=60)),
            make_moment("consumed", TODAY - timedelta(days=10)),
        ]),
        Category(name="Leadership", position=5, events=[
            make_moment("consumed", TODAY - timedelta(days=200)),
        ]),
        Category(name="Kubernetes", position=0, events=[]),
    ]


@pytest.fixture
def storage(sample_categories):
    """In-memory storage seeded with categories, podcast data and learning items."""
    store = InMemoryStorage()
    for category in sample_categories:
        store.add_category(category)

    store.add_podcast_category(PodcastCategory(name="Software Practices", position=1))
    store.add_podcast_category(PodcastCategory(name="Career and Learning", position=2))

    store.add_episode(PodcastEpisode(
        title="Pilot",
        episode_number=1,
        published_at=TODAY - timedelta(days=30),
        category_slugs=["career-and-learning"],
    ))
    store.add_episode(PodcastEpisode(
        title="Refactoring legacy code",
        episode_number=2,
        published_at=TODAY - timedelta(days=2),
        category_slugs=["software-practices", "career-and-learning"],
    ))
    store.add_episode(PodcastEpisode(
        title="Coming soon",
        episode_number=3,
        published_at=date(2999, 1, 1),
        category_slugs=["software-practices"],
    ))

    store.add_learning_item(LearningItem(name="Rust", category="Languages", status="learning", position=1))
    store.add_learning_item(LearningItem(name="Python", category="Languages", status="expert", position=2))
    store.add_learning_item(LearningItem(
        name="Retrospectives",
        category="Practices",
        status="practicing",
        notes="Trying a new format every sprint.",
        position=3,
    ))
    return store


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scoring: Engagement scoring tests"
    )
    config.addinivalue_line(
        "markers", "ranking: Category ranking and selection tests"
    )
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "network: Tests around external HTTP calls (always mocked)"
    )
