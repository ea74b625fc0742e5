"""
Configuration module for Learning Portfolio.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of portfolio/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for the web server
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Root log level for CLI and web entry points
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# =============================================================================
# Portfolio Data
# =============================================================================

# JSON seed file with categories, learning moments and podcast episodes
PORTFOLIO_DATA_PATH: str = os.getenv(
    "PORTFOLIO_DATA_PATH", str(_project_root / "data" / "portfolio.json")
)

# Number of categories surfaced on the home page
HOME_CATEGORY_LIMIT: int = int(os.getenv("HOME_CATEGORY_LIMIT", "4"))


# =============================================================================
# Blog Feed
# =============================================================================

# Public blog address; the scheme is stripped to get the Hashnode host
BLOG_URL: str = os.getenv("BLOG_URL", "https://blog.example.com")

# Optional RSS/Atom feed. When set it is used instead of the Hashnode API.
BLOG_FEED_URL: str = os.getenv("BLOG_FEED_URL", "")

HASHNODE_API_URL: str = os.getenv("HASHNODE_API_URL", "https://gql.hashnode.com")

# How long a fetched post (or a failed fetch) is cached, in seconds
BLOG_CACHE_SECONDS: int = int(os.getenv("BLOG_CACHE_SECONDS", "900"))

# HTTP request timeout in seconds
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "5"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of invalid configuration messages (empty if all valid).
    """
    errors = []

    if is_production() and not BLOG_URL and not BLOG_FEED_URL:
        errors.append("BLOG_URL or BLOG_FEED_URL is required in production")

    if HOME_CATEGORY_LIMIT < 1:
        errors.append("HOME_CATEGORY_LIMIT must be at least 1")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    if BLOG_CACHE_SECONDS < 0:
        errors.append("BLOG_CACHE_SECONDS cannot be negative")

    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"LOG_LEVEL must be a standard level name, got {LOG_LEVEL}")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  PORTFOLIO_DATA_PATH: {PORTFOLIO_DATA_PATH}")
    print(f"  HOME_CATEGORY_LIMIT: {HOME_CATEGORY_LIMIT}")
    print(f"  BLOG_URL: {BLOG_URL or '(not set)'}")
    print(f"  BLOG_FEED_URL: {BLOG_FEED_URL or '(not set)'}")
    print(f"  BLOG_CACHE_SECONDS: {BLOG_CACHE_SECONDS}s")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
