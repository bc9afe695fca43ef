"""
Integration tests for the admin HTTP endpoints.

Startup is not run; pages and notices are registered directly and the
database dependency is overridden with a mock session.
"""

import asyncio
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from admin.notices import notice_queue
from admin.pages import page_registry
from config import settings
from database.session import get_db
from main import app
from services.category_config import CategoryDefinition
from services.category_content import CategoryContentHandler
from services.category_listing import CategoryListing
from services.notice_reporter import render_category_notice
from services.route_registrar import make_category_handler

from fakes import make_term_lookup

CAPS = {"X-Admin-Capabilities": "read, manage_categories"}


@pytest.fixture
def db_session():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def client(db_session):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    page_registry.clear()
    notice_queue.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
    page_registry.clear()
    notice_queue.clear()
    if hasattr(app.state, "category_listing"):
        del app.state.category_listing


def register_sports_page(html="<h1>Sports Content</h1>"):
    handler = AsyncMock(return_value=html)
    page_registry.register_admin_page(
        "Sports Content", "Sports Content", "manage_categories", "dfm-wp-public/sports", handler,
    )
    return handler


class TestHealth:
    """Test health endpoint."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAdminPage:
    """Test GET /admin/{path_key}."""

    def test_renders_registered_page_in_shell(self, client, db_session):
        handler = register_sports_page()

        response = client.get("/admin/dfm-wp-public/sports", headers=CAPS)

        assert response.status_code == 200
        assert "<h1>Sports Content</h1>" in response.text
        assert '<ul id="adminmenu">' in response.text
        handler.assert_awaited_once_with(db_session)

    def test_missing_capability_is_forbidden(self, client):
        handler = register_sports_page()

        response = client.get("/admin/dfm-wp-public/sports", headers={"X-Admin-Capabilities": "read"})

        assert response.status_code == 403
        handler.assert_not_awaited()

    def test_no_capability_header_is_forbidden(self, client):
        register_sports_page()

        assert client.get("/admin/dfm-wp-public/sports").status_code == 403

    def test_unknown_page_is_not_found(self, client):
        register_sports_page()

        assert client.get("/admin/dfm-wp-public/weather", headers=CAPS).status_code == 404

    def test_notice_rendered_above_page(self, client):
        register_sports_page()
        notice_queue.register_deferred_notice(
            lambda: render_category_notice([CategoryDefinition("business", "Business", 12)])
        )

        text = client.get("/admin/dfm-wp-public/sports", headers=CAPS).text

        assert '"Business" with a slug of "business"' in text
        assert text.index("notice-error") < text.index("<h1>Sports Content</h1>")

    def test_category_page_placeholder_end_to_end(self, client, db_session):
        """Real handler over mocked repositories: empty result shows the placeholder."""
        content_store = MagicMock()
        content_store.query_content = AsyncMock(return_value=[])
        handler = make_category_handler(
            CategoryDefinition("animals", "Animals", 10),
            lambda session: CategoryContentHandler(content_store, MagicMock()),
        )
        page_registry.register_admin_page(
            "Animals Content", "Animals Content", "manage_categories", "dfm-wp-public/animals", handler,
        )

        text = client.get("/admin/dfm-wp-public/animals", headers=CAPS).text

        assert "There are no Animals posts. Check back later." in text
        assert "<table" not in text


class TestAdminIndex:
    """Test GET /admin."""

    def test_menu_lists_pages_for_capable_user(self, client):
        register_sports_page()

        text = client.get("/admin", headers=CAPS).text

        assert 'href="/admin/dfm-wp-public/sports"' in text

    def test_menu_hides_pages_without_capability(self, client):
        register_sports_page()

        text = client.get("/admin", headers={"X-Admin-Capabilities": "read"}).text

        assert "dfm-wp-public/sports" not in text


class TestCategoriesApi:
    """Test GET /api/admin/categories."""

    def test_empty_before_startup(self, client):
        response = client.get("/api/admin/categories", headers=CAPS)
        assert response.json() == {"categories": [], "removed": []}

    def test_missing_capability_is_forbidden(self, client):
        response = client.get("/api/admin/categories", headers={"X-Admin-Capabilities": "read"})
        assert response.status_code == 403

    def test_no_capability_header_is_forbidden(self, client):
        assert client.get("/api/admin/categories").status_code == 403

    def test_lists_active_and_removed(self, client, default_taxonomy):
        del default_taxonomy["animals"]
        listing = CategoryListing(
            make_term_lookup(default_taxonomy),
            page_registry,
            notice_queue,
            namespace="dfm-wp-public",
            capability="manage_categories",
        )
        asyncio.run(listing.run())
        app.state.category_listing = listing

        data = client.get("/api/admin/categories", headers=CAPS).json()

        assert data["removed"] == ["animals"]
        assert [c["identifier"] for c in data["categories"]] == [
            "sports", "business", "entertainment", "world-and-news",
        ]


class TestStartup:
    """Test the startup hook that validates categories and registers pages."""

    def test_startup_registers_pages_under_configured_namespace(
        self, client, default_taxonomy, monkeypatch
    ):
        del default_taxonomy["business"]
        startup_session = AsyncMock(spec=AsyncSession)

        @asynccontextmanager
        async def fake_read_only_session():
            yield startup_session

        term_repository = MagicMock(return_value=make_term_lookup(default_taxonomy))
        monkeypatch.setattr("main.read_only_session", fake_read_only_session)
        monkeypatch.setattr("main.TermRepository", term_repository)
        monkeypatch.setattr(settings, "ADMIN_NAMESPACE", "news-admin")
        monkeypatch.setattr(settings, "TAXONOMY_KIND", "section")

        with client:
            listing = app.state.category_listing

            term_repository.assert_called_once_with(startup_session)
            assert listing.registry.frozen
            assert listing.validator.taxonomy_kind == "section"
            assert [p.path_key for p in page_registry.pages()] == [
                "news-admin/sports",
                "news-admin/animals",
                "news-admin/entertainment",
                "news-admin/world-and-news",
            ]
            assert all(p.capability == settings.ADMIN_CAPABILITY for p in page_registry.pages())
            assert len(notice_queue) == 1
