"""
Learning Portfolio - Web Dashboard

A read-only Flask site showing learning drips, podcast episodes and the
latest blog post.

Run with: python -m web.app
Or: cd web && python app.py
"""

import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, abort, jsonify, render_template, request

from portfolio.config import DEBUG, HOME_CATEGORY_LIMIT, LOG_LEVEL, PORTFOLIO_DATA_PATH
from portfolio.podcast import (
    ALL_EPISODES_SLUG,
    category_meta,
    episode_counts,
    latest_episode,
    published_episodes,
)
from portfolio.scoring import (
    drip_percent as compute_drip_percent,
    max_depth,
    portfolio_overview,
    rank_active_categories,
)
from portfolio.services.blog_feed import get_blog_feed
from portfolio.storage import InMemoryStorage, Storage

logger = logging.getLogger(__name__)

app = Flask(__name__)


# =============================================================================
# Storage
# =============================================================================

_storage: Optional[Storage] = None


def get_storage() -> Optional[Storage]:
    """Load the portfolio data file once; None when it is missing or invalid."""
    global _storage
    if _storage is None:
        try:
            _storage = InMemoryStorage.from_json(PORTFOLIO_DATA_PATH)
        except FileNotFoundError:
            logger.warning("Portfolio data file not found: %s", PORTFOLIO_DATA_PATH)
            return None
        except ValueError as e:
            logger.error("Portfolio data file is invalid: %s", e)
            return None
    return _storage


def reset_storage() -> None:
    """Forget the loaded data (reloads on next request)."""
    global _storage
    _storage = None


# =============================================================================
# Pages
# =============================================================================

@app.route("/")
def index():
    """Home page: latest episode and the most recently active categories."""
    storage = get_storage()

    if not storage:
        return render_template("error.html", message="Portfolio data not configured"), 500

    ranked = rank_active_categories(storage.get_categories(), HOME_CATEGORY_LIMIT)
    return render_template(
        "index.html",
        latest_episode=latest_episode(storage.get_episodes(published_only=True)),
        active_categories=ranked,
        max_depth=max_depth(ranked),
    )


@app.route("/learning")
def learning():
    """Every category with its drip, in manual display order."""
    storage = get_storage()

    if not storage:
        return render_template("error.html", message="Portfolio data not configured"), 500

    overview = portfolio_overview(storage.get_categories())

    return render_template(
        "learning.html",
        categories=overview,
        max_depth=max_depth(overview),
    )


@app.route("/learning/items")
def learning_items():
    """Learning items catalogue grouped by category."""
    storage = get_storage()

    if not storage:
        return render_template("error.html", message="Portfolio data not configured"), 500

    return render_template(
        "learning_items.html",
        items_by_category=storage.get_learning_items_by_category(),
    )


@app.route("/learning/items/<int:item_id>")
def learning_item(item_id):
    """A single learning item."""
    storage = get_storage()

    if not storage:
        return render_template("error.html", message="Portfolio data not configured"), 500

    item = storage.get_learning_item(item_id)
    if item is None:
        abort(404)

    return render_template("learning_item.html", item=item)


@app.route("/podcast")
def podcast_index():
    """Podcast categories with their published episode counts."""
    storage = get_storage()

    if not storage:
        return render_template("error.html", message="Portfolio data not configured"), 500

    episodes = storage.get_episodes(published_only=True)

    return render_template(
        "podcast_index.html",
        categories=storage.get_podcast_categories(),
        total_episode_count=len(episodes),
        episode_counts=episode_counts(episodes),
        all_slug=ALL_EPISODES_SLUG,
    )


@app.route("/podcast/<slug>")
def podcast_category(slug):
    """Episodes of one category, or of all categories for the "all" slug."""
    storage = get_storage()

    if not storage:
        return render_template("error.html", message="Portfolio data not configured"), 500

    if slug == ALL_EPISODES_SLUG:
        title = "All Episodes"
    else:
        category = storage.get_podcast_category(slug)
        if category is None:
            abort(404)
        title = category.name

    episodes = published_episodes(storage.get_episodes(published_only=True), category_slug=slug)

    return render_template(
        "podcast_category.html",
        title=title,
        slug=slug,
        episodes=episodes,
    )


# =============================================================================
# JSON Endpoints
# =============================================================================

@app.route("/blog/latest")
def blog_latest():
    """Latest blog post, or null when the feed is unavailable."""
    post = get_blog_feed().fetch_latest()
    return jsonify({"post": post.to_dict() if post else None})


@app.route("/api/portfolio")
def api_portfolio():
    """Ranked categories with depth and drip percentage."""
    storage = get_storage()

    if not storage:
        return jsonify({"error": "Portfolio data not configured"}), 500

    categories = storage.get_categories()

    if request.args.get("all", "").lower() in ("1", "true", "yes"):
        ranked = portfolio_overview(categories)
    else:
        try:
            limit = int(request.args.get("limit", HOME_CATEGORY_LIMIT))
        except ValueError:
            return jsonify({"error": "limit must be an integer"}), 400
        if limit < 0:
            return jsonify({"error": "limit cannot be negative"}), 400
        ranked = rank_active_categories(categories, limit)

    basis = max_depth(ranked)

    return jsonify({
        "success": True,
        "count": len(ranked),
        "max_depth": round(basis, 4),
        "categories": [r.to_dict(max_depth=basis) for r in ranked],
    })


# =============================================================================
# Template Filters
# =============================================================================

@app.template_filter("drip_percent")
def drip_percent(depth, basis):
    """Drip height in percent of the page's max depth."""
    return round(compute_drip_percent(depth, basis), 1)


@app.template_filter("format_date")
def format_date(value):
    """Format a date for display."""
    if not value:
        return "Unknown"
    if isinstance(value, str):
        return value
    if isinstance(value, (date, datetime)):
        return value.strftime("%b %d, %Y")
    return str(value)


@app.template_filter("podcast_meta")
def podcast_meta(slug):
    return category_meta(slug)


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 50)
    print("Learning Portfolio")
    print("=" * 50)
    print("Open http://localhost:5001 in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(debug=DEBUG, port=5001)
