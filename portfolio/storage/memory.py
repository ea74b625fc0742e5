"""
In-memory storage backend for Learning Portfolio.

Holds categories, learning moments, podcast data and learning items in
dictionaries. Used by the web app and CLI (seeded from a JSON file) and by
the tests.

Seed file layout:

    {
        "categories": [
            {"name": "Testing", "position": 1,
             "events": [{"engagement_type": "applied",
                         "occurred_at": "2024-03-01",
                         "description": "Added contract tests"}]}
        ],
        "podcast_categories": [{"name": "Career and Learning", "position": 1}],
        "episodes": [{"title": "Pilot", "episode_number": 1,
                      "published_at": "2024-01-05",
                      "category_slugs": ["career-and-learning"]}],
        "learning_items": [{"name": "Rust", "category": "Languages",
                            "status": "practicing", "position": 1}]
    }
"""

import json
import logging
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

from portfolio.models.category import Category
from portfolio.models.learning_item import LearningItem
from portfolio.models.learning_moment import LearningMoment
from portfolio.models.podcast import PodcastCategory, PodcastEpisode
from portfolio.storage.base import Storage

logger = logging.getLogger(__name__)


class InMemoryStorage(Storage):
    """
    In-memory storage.

    Data is lost when the process ends. Reads return copies of the
    categories, so callers always work on a snapshot.
    """

    def __init__(self):
        self._categories: Dict[str, Category] = {}
        self._podcast_categories: Dict[str, PodcastCategory] = {}
        self._episodes: Dict[int, PodcastEpisode] = {}
        self._learning_items: Dict[int, LearningItem] = {}

    @property
    def name(self) -> str:
        return "memory"

    # =========================================================================
    # Categories and learning moments
    # =========================================================================

    @staticmethod
    def _snapshot(category: Category) -> Category:
        return Category(name=category.name, position=category.position, events=list(category.events))

    def get_categories(self) -> List[Category]:
        ordered = sorted(self._categories.values(), key=lambda c: (c.position, c.name))
        return [self._snapshot(c) for c in ordered]

    def get_category(self, name: str) -> Optional[Category]:
        category = self._categories.get(name)
        return self._snapshot(category) if category else None

    @staticmethod
    def _owned(event: LearningMoment, category_name: str) -> LearningMoment:
        """The moment stamped with the category that stores it."""
        if event.category_name == category_name:
            return event
        return replace(event, category_name=category_name)

    def add_category(self, category: Category) -> Category:
        if category.name in self._categories:
            raise ValueError(f"Category already exists: {category.name}")
        stored = Category(
            name=category.name,
            position=category.position,
            events=[self._owned(e, category.name) for e in category.events],
        )
        self._categories[stored.name] = stored
        logger.debug("Added category %s with %d moments", stored.name, len(stored.events))
        return self._snapshot(stored)

    def add_event(self, category_name: str, event: LearningMoment) -> LearningMoment:
        category = self._categories.get(category_name)
        if category is None:
            raise KeyError(f"Unknown category: {category_name}")
        event = self._owned(event, category_name)
        category.events.append(event)
        return event

    def delete_category(self, name: str) -> bool:
        category = self._categories.pop(name, None)
        if category is None:
            return False
        logger.debug("Deleted category %s and %d moments", name, len(category.events))
        return True

    def delete_event(self, category_name: str, event: LearningMoment) -> bool:
        category = self._categories.get(category_name)
        if category is None:
            return False
        event = self._owned(event, category_name)
        for index, existing in enumerate(category.events):
            if existing == event:
                del category.events[index]
                return True
        return False

    def count_events(self, category_name: str) -> int:
        category = self._categories.get(category_name)
        return len(category.events) if category else 0

    # =========================================================================
    # Podcast
    # =========================================================================

    def add_podcast_category(self, category: PodcastCategory) -> PodcastCategory:
        if any(c.name == category.name for c in self._podcast_categories.values()):
            raise ValueError(f"Podcast category already exists: {category.name}")
        if category.slug in self._podcast_categories:
            raise ValueError(f"Podcast category slug already exists: {category.slug}")
        self._podcast_categories[category.slug] = category
        return category

    def add_episode(self, episode: PodcastEpisode) -> PodcastEpisode:
        if episode.episode_number in self._episodes:
            raise ValueError(f"Episode number already exists: {episode.episode_number}")
        self._episodes[episode.episode_number] = episode
        return episode

    def get_episodes(
        self,
        published_only: bool = True,
        today: Optional[date] = None,
    ) -> List[PodcastEpisode]:
        episodes = list(self._episodes.values())
        if published_only:
            episodes = [e for e in episodes if e.is_published(today)]
        # Unscheduled episodes sort last; episode number breaks date ties.
        return sorted(
            episodes,
            key=lambda e: (e.published_at or date.min, e.episode_number),
            reverse=True,
        )

    def get_podcast_categories(self) -> List[PodcastCategory]:
        return sorted(self._podcast_categories.values(), key=lambda c: (c.position, c.name))

    def get_podcast_category(self, slug: str) -> Optional[PodcastCategory]:
        return self._podcast_categories.get(slug)

    # =========================================================================
    # Learning items
    # =========================================================================

    def add_learning_item(self, item: LearningItem) -> LearningItem:
        """Store a catalogue item, assigning the next free id when it has none."""
        if item.item_id is None:
            item = replace(item, item_id=max(self._learning_items, default=0) + 1)
        elif item.item_id in self._learning_items:
            raise ValueError(f"Learning item id already exists: {item.item_id}")
        self._learning_items[item.item_id] = item
        return item

    def get_learning_items(self) -> List[LearningItem]:
        return sorted(self._learning_items.values(), key=lambda i: (i.position, i.name, i.item_id))

    def get_learning_item(self, item_id: int) -> Optional[LearningItem]:
        return self._learning_items.get(item_id)

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def from_dict(cls, payload: dict) -> "InMemoryStorage":
        """
        Build a storage from a seed payload.

        Raises:
            ValueError: If the payload or any record is malformed.
        """
        if not isinstance(payload, dict):
            raise ValueError("Seed payload must be a JSON object")

        storage = cls()
        sections = (
            ("categories", Category.from_dict, storage.add_category),
            ("podcast_categories", PodcastCategory.from_dict, storage.add_podcast_category),
            ("episodes", PodcastEpisode.from_dict, storage.add_episode),
            ("learning_items", LearningItem.from_dict, storage.add_learning_item),
        )
        for key, parse, add in sections:
            records = payload.get(key, [])
            if not isinstance(records, list):
                raise ValueError(f"'{key}' must be a list")
            for index, record in enumerate(records, start=1):
                if not isinstance(record, dict):
                    raise ValueError(f"{key} item {index}: must be an object")
                try:
                    add(parse(record))
                except (TypeError, ValueError) as e:
                    raise ValueError(f"{key} item {index}: {e}") from e

        logger.info(
            "Loaded %d categories, %d podcast categories, %d episodes, %d learning items",
            len(storage._categories),
            len(storage._podcast_categories),
            len(storage._episodes),
            len(storage._learning_items),
        )
        return storage

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "InMemoryStorage":
        """Load a seed file. Raises FileNotFoundError or ValueError."""
        with open(path, encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_dict(payload)

    def to_dict(self) -> dict:
        return {
            "categories": [c.to_dict() for c in self.get_categories()],
            "podcast_categories": [
                {"name": c.name, "slug": c.slug, "position": c.position}
                for c in self.get_podcast_categories()
            ],
            "episodes": [
                {
                    "title": e.title,
                    "episode_number": e.episode_number,
                    "description": e.description,
                    "published_at": e.published_at.isoformat() if e.published_at else None,
                    "embed_code": e.embed_code,
                    "external_links": e.external_links,
                    "category_slugs": e.category_slugs,
                }
                for e in self.get_episodes(published_only=False)
            ],
            "learning_items": [i.to_dict() for i in self.get_learning_items()],
        }

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._categories.clear()
        self._podcast_categories.clear()
        self._episodes.clear()
        self._learning_items.clear()
