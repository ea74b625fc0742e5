"""
Podcast models.

Episodes and the categories used to browse them.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


def slugify(name: str) -> str:
    """Lowercase, hyphen-separated slug ("Teams & Collaboration" -> "teams-collaboration")."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower())
    return slug.strip("-")


@dataclass
class PodcastCategory:
    """A browsable podcast category."""

    name: str
    slug: str = ""
    position: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("PodcastCategory validation failed: name is required and cannot be empty")
        if not self.slug:
            self.slug = slugify(self.name)

    @classmethod
    def from_dict(cls, data: dict) -> "PodcastCategory":
        return cls(
            name=data.get("name"),
            slug=data.get("slug", ""),
            position=int(data.get("position", 0)),
        )


@dataclass
class PodcastEpisode:
    """
    A single podcast episode.

    Attributes:
        title: Episode title.
        episode_number: Unique episode number.
        description: Show notes.
        published_at: Release date; None or a future date means unpublished.
        embed_code: Player HTML snippet.
        external_links: Platform name -> URL.
        category_slugs: Slugs of the PodcastCategory entries it belongs to.
    """

    title: str
    episode_number: int
    description: str = ""
    published_at: Optional[date] = None
    embed_code: str = ""
    external_links: dict[str, str] = field(default_factory=dict)
    category_slugs: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        errors = []

        if not isinstance(self.title, str) or not self.title.strip():
            errors.append("title is required and cannot be empty")

        if self.episode_number is None:
            errors.append("episode_number is required")
        elif not isinstance(self.episode_number, int) or isinstance(self.episode_number, bool):
            errors.append(f"episode_number must be an integer, got {self.episode_number!r}")

        if isinstance(self.published_at, datetime):
            self.published_at = self.published_at.date()
        elif self.published_at == "":
            self.published_at = None
        elif isinstance(self.published_at, str):
            try:
                self.published_at = date.fromisoformat(self.published_at[:10])
            except ValueError:
                errors.append(f"published_at is not a valid date: {self.published_at!r}")
        elif self.published_at is not None and not isinstance(self.published_at, date):
            errors.append(f"published_at must be a date or ISO string, got {self.published_at!r}")

        if not isinstance(self.description, str) or not isinstance(self.embed_code, str):
            errors.append("description and embed_code must be strings")

        if not isinstance(self.external_links, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in self.external_links.items()
        ):
            errors.append(f"external_links must map platform names to URLs, got {self.external_links!r}")

        if not isinstance(self.category_slugs, list) or not all(
            isinstance(s, str) for s in self.category_slugs
        ):
            errors.append(f"category_slugs must be a list of strings, got {self.category_slugs!r}")

        if errors:
            raise ValueError(f"PodcastEpisode validation failed: {'; '.join(errors)}")

    def is_published(self, today: Optional[date] = None) -> bool:
        """True when the episode has a release date on or before today."""
        if self.published_at is None:
            return False
        if today is None:
            today = date.today()
        return self.published_at <= today

    @classmethod
    def from_dict(cls, data: dict) -> "PodcastEpisode":
        number = data.get("episode_number")
        return cls(
            title=data.get("title"),
            episode_number=int(number) if number is not None else None,
            description=data.get("description") or "",
            published_at=data.get("published_at"),
            embed_code=data.get("embed_code") or "",
            external_links=data.get("external_links") or {},
            category_slugs=data.get("category_slugs") or [],
        )

    def __str__(self) -> str:
        return f"#{self.episode_number} {self.title}"
