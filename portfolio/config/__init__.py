"""
Configuration module.

Handles environment variables and application settings.
"""

from portfolio.config.config import (
    APP_ENV,
    DEBUG,
    LOG_LEVEL,
    PORTFOLIO_DATA_PATH,
    HOME_CATEGORY_LIMIT,
    BLOG_URL,
    BLOG_FEED_URL,
    HASHNODE_API_URL,
    BLOG_CACHE_SECONDS,
    REQUEST_TIMEOUT,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "PORTFOLIO_DATA_PATH",
    "HOME_CATEGORY_LIMIT",
    "BLOG_URL",
    "BLOG_FEED_URL",
    "HASHNODE_API_URL",
    "BLOG_CACHE_SECONDS",
    "REQUEST_TIMEOUT",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
