"""
Services module.

Contains external service integrations like the blog feed.
"""

from portfolio.services.blog_feed import BlogFeedService, BlogPost, get_blog_feed, truncate_text

__all__ = [
    "BlogFeedService",
    "BlogPost",
    "get_blog_feed",
    "truncate_text",
]
