"""
Blog feed service.

Fetches the latest post of the writer's blog for the home page. Two backends:

- Hashnode GraphQL API (default), publication host taken from BLOG_URL
- Any RSS/Atom feed via feedparser, when BLOG_FEED_URL is set

Results are cached for BLOG_CACHE_SECONDS. Every failure is logged and turns
into None; the page simply renders without a post.
"""

import logging
import re
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Callable, Optional

import feedparser
import requests

from portfolio.config import (
    BLOG_URL,
    BLOG_FEED_URL,
    HASHNODE_API_URL,
    BLOG_CACHE_SECONDS,
    REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)

# Maximum description length, ellipsis included
DESCRIPTION_LENGTH = 200

LATEST_POST_QUERY = """
query LatestPost($host: String!) {
  publication(host: $host) {
    posts(first: 1) {
      edges {
        node {
          title
          url
          brief
          publishedAt
        }
      }
    }
  }
}
"""


@dataclass
class BlogPost:
    """The latest blog post as shown on the home page."""
    title: str
    url: str
    description: Optional[str] = None
    published_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "published_at": self.published_at.isoformat() if self.published_at else None,
        }


def truncate_text(text: Optional[str], length: int = DESCRIPTION_LENGTH) -> Optional[str]:
    """
    Shorten text to at most `length` characters, ending in "..." when cut.

    Returns None for None input.
    """
    if text is None:
        return None
    text = text.strip()
    if len(text) <= length:
        return text
    return text[: length - 3].rstrip() + "..."


def blog_host(url: str) -> str:
    """Strip the scheme (and trailing slash) from a blog address."""
    return re.sub(r"^https?://", "", url).rstrip("/")


class BlogFeedService:
    """Latest-post lookup with a time-based cache."""

    def __init__(
        self,
        blog_url: Optional[str] = None,
        feed_url: Optional[str] = None,
        api_url: Optional[str] = None,
        cache_seconds: Optional[int] = None,
        timeout: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.blog_url = blog_url if blog_url is not None else BLOG_URL
        self.feed_url = feed_url if feed_url is not None else BLOG_FEED_URL
        self.api_url = api_url or HASHNODE_API_URL
        self.cache_seconds = cache_seconds if cache_seconds is not None else BLOG_CACHE_SECONDS
        self.timeout = timeout or REQUEST_TIMEOUT
        self._clock = clock
        self._lock = threading.Lock()
        self._cached: Optional[BlogPost] = None
        self._cached_at: Optional[float] = None

    def fetch_latest(self) -> Optional[BlogPost]:
        """
        Return the latest post, from cache when still fresh.

        A failed fetch (None) is cached too, so a broken feed is not retried
        on every page view.
        """
        with self._lock:
            now = self._clock()
            if self._cached_at is not None and now - self._cached_at < self.cache_seconds:
                return self._cached

            post = self._fetch()
            self._cached = post
            self._cached_at = now
            return post

    def clear_cache(self) -> None:
        with self._lock:
            self._cached = None
            self._cached_at = None

    def _fetch(self) -> Optional[BlogPost]:
        if self.feed_url:
            return self.fetch_from_feed()
        return self.fetch_from_hashnode()

    # =========================================================================
    # Hashnode
    # =========================================================================

    def fetch_from_hashnode(self) -> Optional[BlogPost]:
        """Query the Hashnode GraphQL API for the newest post."""
        try:
            response = requests.post(
                self.api_url,
                json={
                    "query": LATEST_POST_QUERY,
                    "variables": {"host": blog_host(self.blog_url)},
                },
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Failed to fetch blog from Hashnode: %s", e)
            return None

        try:
            node = data["data"]["publication"]["posts"]["edges"][0]["node"]
        except (KeyError, IndexError, TypeError):
            logger.info("No post found for %s", blog_host(self.blog_url))
            return None

        if not node or not node.get("title") or not node.get("url"):
            return None

        published_at = None
        if node.get("publishedAt"):
            try:
                published_at = datetime.fromisoformat(node["publishedAt"].replace("Z", "+00:00"))
            except (ValueError, AttributeError):
                logger.debug("Unparseable publishedAt: %r", node["publishedAt"])

        return BlogPost(
            title=node["title"],
            url=node["url"],
            description=truncate_text(node.get("brief")),
            published_at=published_at,
        )

    # =========================================================================
    # RSS / Atom
    # =========================================================================

    def fetch_from_feed(self) -> Optional[BlogPost]:
        """Read the first entry of the configured RSS/Atom feed."""
        try:
            feed = feedparser.parse(
                self.feed_url,
                request_headers={"User-Agent": "LearningPortfolio/1.0 (RSS Reader)"},
            )
        except Exception as e:
            logger.warning("Failed to fetch blog feed %s: %s", self.feed_url, e)
            return None

        if feed.bozo and not feed.entries:
            logger.warning("Blog feed parse error: %s", feed.get("bozo_exception"))
            return None
        if not feed.entries:
            return None

        entry = feed.entries[0]
        title = (entry.get("title") or "").strip()
        url = (entry.get("link") or "").strip()
        if not title or not url:
            return None

        summary = entry.get("summary")
        if summary:
            summary = re.sub(r"\s+", " ", re.sub(r"<[^>]+>", " ", summary))

        return BlogPost(
            title=title,
            url=url,
            description=truncate_text(summary),
            published_at=self._parse_entry_date(entry),
        )

    @staticmethod
    def _parse_entry_date(entry) -> Optional[datetime]:
        if entry.get("published_parsed"):
            try:
                return datetime(*entry["published_parsed"][:6])
            except (ValueError, TypeError):
                pass
        if entry.get("published"):
            try:
                return parsedate_to_datetime(entry["published"])
            except (ValueError, TypeError):
                pass
        return None


# Singleton instance
_service: Optional[BlogFeedService] = None


def get_blog_feed() -> BlogFeedService:
    """Get the shared blog feed service."""
    global _service
    if _service is None:
        _service = BlogFeedService()
    return _service
