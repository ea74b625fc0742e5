"""
Tests for Web Dashboard Application.

Tests the Flask routes, JSON endpoints, template filters,
and error handling.
"""

import pytest
from datetime import date, datetime
from unittest.mock import Mock, patch

from web.app import app, drip_percent, format_date, get_storage, reset_storage
from portfolio.services.blog_feed import BlogPost
from portfolio.storage import InMemoryStorage


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def client():
    """Flask test client."""
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def with_storage(storage):
    with patch("web.app.get_storage", return_value=storage):
        yield storage


@pytest.fixture
def without_storage():
    with patch("web.app.get_storage", return_value=None):
        yield


# =============================================================================
# Test Template Filters
# =============================================================================

class TestTemplateFilters:
    """Tests for Jinja2 template filters."""

    def test_drip_percent(self):
        assert drip_percent(2.0, 4.0) == 50.0
        assert drip_percent(1.0, 3.0) == 33.3

    def test_drip_percent_zero_basis(self):
        assert drip_percent(1.0, 0) == 0.0

    def test_format_date_with_date(self):
        assert format_date(date(2025, 12, 25)) == "Dec 25, 2025"

    def test_format_date_with_datetime(self):
        assert format_date(datetime(2025, 12, 25, 10, 30)) == "Dec 25, 2025"

    def test_format_date_none(self):
        assert format_date(None) == "Unknown"

    def test_format_date_string_passthrough(self):
        assert format_date("2025-12-25") == "2025-12-25"


# =============================================================================
# Test Pages
# =============================================================================

class TestHomePage:
    """Tests for the home page."""

    def test_renders_active_categories(self, client, with_storage):
        response = client.get("/")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        for name in ("Testing", "Agile", "Architecture", "Rust"):
            assert name in body

    def test_limits_and_filters(self, client, with_storage):
        """Oldest active and empty categories are not shown."""
        body = client.get("/").get_data(as_text=True)

        assert "Leadership" not in body
        assert "Kubernetes" not in body

    def test_most_recent_first(self, client, with_storage):
        body = client.get("/").get_data(as_text=True)
        assert body.index("Testing") < body.index("Agile") < body.index("Architecture") < body.index("Rust")

    def test_shows_latest_published_episode(self, client, with_storage):
        body = client.get("/").get_data(as_text=True)

        assert "Refactoring legacy code" in body
        assert "Coming soon" not in body

    def test_empty_portfolio(self, client):
        with patch("web.app.get_storage", return_value=InMemoryStorage()):
            response = client.get("/")

        assert response.status_code == 200
        assert "Nothing logged yet" in response.get_data(as_text=True)

    def test_not_configured(self, client, without_storage):
        response = client.get("/")

        assert response.status_code == 500
        assert "Portfolio data not configured" in response.get_data(as_text=True)


class TestLearningPage:
    """Tests for /learning."""

    def test_displays_every_category(self, client, with_storage):
        response = client.get("/learning")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert "How I Learn" in body
        assert "Kubernetes" in body
        assert "Leadership" in body

    def test_empty_state(self, client):
        with patch("web.app.get_storage", return_value=InMemoryStorage()):
            body = client.get("/learning").get_data(as_text=True)

        assert "No learning categories yet" in body

    def test_deepest_category_full_height(self, client, with_storage):
        body = client.get("/learning").get_data(as_text=True)
        assert "height: 100.0%" in body


class TestLearningItemsPages:
    """Tests for /learning/items routes."""

    def test_grouped_by_category(self, client, with_storage):
        response = client.get("/learning/items")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert body.index("Languages") < body.index("Rust") < body.index("Python")
        assert body.index("Python") < body.index("Practices") < body.index("Retrospectives")

    def test_shows_status(self, client, with_storage):
        body = client.get("/learning/items").get_data(as_text=True)
        assert "Expert" in body

    def test_empty_state(self, client):
        with patch("web.app.get_storage", return_value=InMemoryStorage()):
            body = client.get("/learning/items").get_data(as_text=True)

        assert "No learning items yet" in body

    def test_item_page(self, client, with_storage):
        response = client.get("/learning/items/3")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert "Retrospectives" in body
        assert "Trying a new format every sprint." in body

    def test_unknown_item_404(self, client, with_storage):
        assert client.get("/learning/items/99").status_code == 404

    def test_not_configured(self, client, without_storage):
        assert client.get("/learning/items").status_code == 500


class TestPodcastPages:
    """Tests for /podcast routes."""

    def test_index_lists_categories_with_counts(self, client, with_storage):
        response = client.get("/podcast")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert "Software Practices" in body
        assert "Career and Learning" in body
        assert "All Episodes" in body

    def test_category_page(self, client, with_storage):
        response = client.get("/podcast/career-and-learning")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert "Pilot" in body
        assert "Refactoring legacy code" in body

    def test_category_page_hides_unpublished(self, client, with_storage):
        body = client.get("/podcast/software-practices").get_data(as_text=True)
        assert "Coming soon" not in body

    def test_all_episodes(self, client, with_storage):
        response = client.get("/podcast/all")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert "All Episodes" in body
        assert "Pilot" in body

    def test_unknown_slug_404(self, client, with_storage):
        assert client.get("/podcast/nope").status_code == 404


# =============================================================================
# Test JSON Endpoints
# =============================================================================

class TestBlogLatest:
    """Tests for /blog/latest."""

    def test_returns_post(self, client):
        feed = Mock()
        feed.fetch_latest.return_value = BlogPost(title="Hello", url="https://blog.example.com/hello")

        with patch("web.app.get_blog_feed", return_value=feed):
            response = client.get("/blog/latest")

        assert response.status_code == 200
        assert response.get_json()["post"]["title"] == "Hello"

    def test_returns_null_when_unavailable(self, client):
        feed = Mock()
        feed.fetch_latest.return_value = None

        with patch("web.app.get_blog_feed", return_value=feed):
            response = client.get("/blog/latest")

        assert response.status_code == 200
        assert response.get_json() == {"post": None}


class TestApiPortfolio:
    """Tests for /api/portfolio."""

    def test_default_ranking(self, client, with_storage):
        data = client.get("/api/portfolio").get_json()

        assert data["success"] is True
        assert data["count"] == 4
        assert [c["name"] for c in data["categories"]] == ["Testing", "Agile", "Architecture", "Rust"]

    def test_percent_relative_to_displayed_set(self, client, with_storage):
        data = client.get("/api/portfolio").get_json()

        assert max(c["percent"] for c in data["categories"]) == 100.0
        assert data["max_depth"] == max(c["depth"] for c in data["categories"])

    def test_limit_param(self, client, with_storage):
        data = client.get("/api/portfolio?limit=2").get_json()
        assert data["count"] == 2

    def test_all_param(self, client, with_storage):
        data = client.get("/api/portfolio?all=true").get_json()
        names = [c["name"] for c in data["categories"]]
        assert names[0] == "Kubernetes"
        assert len(names) == 6

    def test_invalid_limit(self, client, with_storage):
        assert client.get("/api/portfolio?limit=abc").status_code == 400
        assert client.get("/api/portfolio?limit=-1").status_code == 400

    def test_empty_portfolio_basis(self, client):
        with patch("web.app.get_storage", return_value=InMemoryStorage()):
            data = client.get("/api/portfolio").get_json()

        assert data["count"] == 0
        assert data["max_depth"] == 1.0

    def test_not_configured(self, client, without_storage):
        response = client.get("/api/portfolio")
        assert response.status_code == 500


# =============================================================================
# Test Storage Loading
# =============================================================================

class TestGetStorage:
    """Tests for get_storage()."""

    def setup_method(self):
        reset_storage()

    def teardown_method(self):
        reset_storage()

    def test_missing_file_returns_none(self, tmp_path):
        with patch("web.app.PORTFOLIO_DATA_PATH", str(tmp_path / "missing.json")):
            assert get_storage() is None

    def test_invalid_file_returns_none(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{nope")
        with patch("web.app.PORTFOLIO_DATA_PATH", str(path)):
            assert get_storage() is None

    def test_loads_once(self, tmp_path):
        path = tmp_path / "portfolio.json"
        path.write_text('{"categories": [{"name": "Go"}]}')
        with patch("web.app.PORTFOLIO_DATA_PATH", str(path)):
            first = get_storage()
            path.unlink()
            second = get_storage()

        assert first is second
        assert first.get_category("Go") is not None

    def test_wrongly_typed_episode_date_returns_none(self, tmp_path):
        path = tmp_path / "portfolio.json"
        path.write_text('{"episodes": [{"title": "Pilot", "episode_number": 1, "published_at": 20240101}]}')
        with patch("web.app.PORTFOLIO_DATA_PATH", str(path)):
            assert get_storage() is None
