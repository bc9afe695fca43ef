"""
Unit tests for RouteRegistrar and per-category page handlers.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from admin.pages import AdminPageRegistry
from services.category_config import CategoryDefinition, CategoryRegistry
from services.route_registrar import RouteRegistrar, build_path_key, make_category_handler

from fakes import RecordingPageRegistrar


def mock_content_factory():
    """Factory returning one shared mock content handler."""
    content_handler = MagicMock()
    content_handler.handle = AsyncMock(return_value="<h1>page</h1>")
    return MagicMock(return_value=content_handler), content_handler


class TestRegisterRoutes:
    """Test page registration from the validated registry."""

    def test_one_page_per_category_in_order(self):
        pages = RecordingPageRegistrar()
        registry = CategoryRegistry.from_config()
        registry.remove("business")

        RouteRegistrar(pages, "dfm-wp-public").register_routes(registry, "manage_categories")

        assert [p.path_key for p in pages.calls] == [
            "dfm-wp-public/sports",
            "dfm-wp-public/animals",
            "dfm-wp-public/entertainment",
            "dfm-wp-public/world-and-news",
        ]

    def test_titles_and_capability(self):
        pages = RecordingPageRegistrar()
        registry = CategoryRegistry([CategoryDefinition("world-and-news", "World and News", 100)])

        RouteRegistrar(pages, "dfm-wp-public").register_routes(registry, "manage_categories")

        page = pages.calls[0]
        assert page.title == "World and News Content"
        assert page.menu_title == "World and News Content"
        assert page.capability == "manage_categories"

    def test_empty_registry_registers_nothing(self):
        pages = RecordingPageRegistrar()

        RouteRegistrar(pages, "dfm-wp-public").register_routes(CategoryRegistry(), "manage_categories")

        assert pages.calls == []

    def test_reregistration_is_stable(self):
        pages = AdminPageRegistry()
        registry = CategoryRegistry.from_config()
        registrar = RouteRegistrar(pages, "dfm-wp-public")

        registrar.register_routes(registry, "manage_categories")
        first = [p.path_key for p in pages.pages()]
        registrar.register_routes(registry, "manage_categories")

        assert [p.path_key for p in pages.pages()] == first
        assert len(pages.pages()) == 5

    def test_path_key(self):
        assert build_path_key("dfm-wp-public", "sports") == "dfm-wp-public/sports"


class TestCategoryHandlers:
    """Each page handler must be bound to its own category."""

    @pytest.mark.asyncio
    async def test_second_handler_uses_its_own_limit(self, mock_db_session):
        pages = RecordingPageRegistrar()
        factory, content_handler = mock_content_factory()
        registry = CategoryRegistry([
            CategoryDefinition("a", "A", 5),
            CategoryDefinition("b", "B", 10),
        ])

        RouteRegistrar(pages, "ns", factory).register_routes(registry, "manage_categories")
        await pages.calls[1].handler(mock_db_session)

        content_handler.handle.assert_awaited_once_with("b", 10, "B")

    @pytest.mark.asyncio
    async def test_every_handler_bound_to_its_category(self, mock_db_session):
        pages = RecordingPageRegistrar()
        factory, content_handler = mock_content_factory()
        registry = CategoryRegistry.from_config()

        RouteRegistrar(pages, "ns", factory).register_routes(registry, "manage_categories")
        for page in pages.calls:
            await page.handler(mock_db_session)

        called = [call.args for call in content_handler.handle.await_args_list]
        assert called == [
            ("sports", 25, "Sports"),
            ("animals", 10, "Animals"),
            ("business", 12, "Business"),
            ("entertainment", 50, "Entertainment"),
            ("world-and-news", 100, "World and News"),
        ]

    @pytest.mark.asyncio
    async def test_handler_builds_content_handler_per_request(self, mock_db_session):
        factory, content_handler = mock_content_factory()
        handler = make_category_handler(CategoryDefinition("animals", "Animals", 10), factory)

        html = await handler(mock_db_session)

        factory.assert_called_once_with(mock_db_session)
        assert html == "<h1>page</h1>"
