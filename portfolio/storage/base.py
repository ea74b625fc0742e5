"""
Base storage abstraction for Learning Portfolio.

Defines the read/write interface the presentation layers rely on. The scoring
module never touches storage; callers load a snapshot and pass it in.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional

from portfolio.models.category import Category
from portfolio.models.learning_item import LearningItem
from portfolio.models.learning_moment import LearningMoment
from portfolio.models.podcast import PodcastCategory, PodcastEpisode


class Storage(ABC):
    """
    Abstract base class for all storage backends.

    Implementations must provide:
    - Ordered category scans with moments loaded
    - Per-category moment accessors
    - Cascading category deletion (a category owns its moments)
    - Podcast episode and category queries
    - The learning items catalogue
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this storage backend.

        Used for logging and debugging.
        """
        pass

    # =========================================================================
    # Categories and learning moments
    # =========================================================================

    @abstractmethod
    def get_categories(self) -> List[Category]:
        """
        Retrieve all categories with their moments loaded.

        Returns:
            Categories ordered by position, then name.
        """
        pass

    @abstractmethod
    def get_category(self, name: str) -> Optional[Category]:
        """Retrieve a single category by name, or None."""
        pass

    @abstractmethod
    def add_category(self, category: Category) -> Category:
        """
        Store a new category (and any moments it already holds).

        Raises:
            ValueError: If a category with the same name exists.
        """
        pass

    @abstractmethod
    def add_event(self, category_name: str, event: LearningMoment) -> LearningMoment:
        """
        Attach a moment to an existing category.

        Raises:
            KeyError: If the category does not exist.
        """
        pass

    @abstractmethod
    def delete_category(self, name: str) -> bool:
        """
        Delete a category together with all of its moments.

        Returns:
            True if something was deleted.
        """
        pass

    @abstractmethod
    def delete_event(self, category_name: str, event: LearningMoment) -> bool:
        """Delete a single moment. Returns True if it was found."""
        pass

    def get_events(self, category_name: str) -> List[LearningMoment]:
        """
        Moments of a category in chronological order (oldest first).

        Returns an empty list for an unknown category.
        """
        category = self.get_category(category_name)
        if category is None:
            return []
        return category.chronological_events()

    def count_events(self, category_name: str) -> int:
        """Number of moments recorded for a category."""
        category = self.get_category(category_name)
        return len(category.events) if category else 0

    # =========================================================================
    # Podcast
    # =========================================================================

    @abstractmethod
    def get_episodes(
        self,
        published_only: bool = True,
        today: Optional[date] = None,
    ) -> List[PodcastEpisode]:
        """
        Retrieve podcast episodes, newest first.

        Args:
            published_only: Skip unscheduled and future episodes.
            today: Reference date for publication (default: today).
        """
        pass

    @abstractmethod
    def get_podcast_categories(self) -> List[PodcastCategory]:
        """Podcast categories ordered by position, then name."""
        pass

    def get_podcast_category(self, slug: str) -> Optional[PodcastCategory]:
        """Retrieve a podcast category by slug, or None."""
        for category in self.get_podcast_categories():
            if category.slug == slug:
                return category
        return None

    # =========================================================================
    # Learning items
    # =========================================================================

    @abstractmethod
    def get_learning_items(self) -> List[LearningItem]:
        """Catalogue items ordered by position, then name."""
        pass

    def get_learning_item(self, item_id: int) -> Optional[LearningItem]:
        """Retrieve a catalogue item by id, or None."""
        for item in self.get_learning_items():
            if item.item_id == item_id:
                return item
        return None

    def get_learning_items_by_category(self) -> Dict[str, List[LearningItem]]:
        """
        Catalogue items grouped by their category label.

        Groups appear in the order their first item appears; items keep
        their position order inside each group.
        """
        groups: Dict[str, List[LearningItem]] = {}
        for item in self.get_learning_items():
            groups.setdefault(item.category, []).append(item)
        return groups

    def __str__(self) -> str:
        return f"Storage({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
