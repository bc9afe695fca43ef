"""
Per-category admin page registration.

One admin page per surviving category, at "{namespace}/{slug}". Each
page gets its own handler built from a frozen CategoryDefinition, so a
page always queries its own category and limit.
"""

import logging
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from services.category_config import CategoryDefinition, CategoryRegistry
from services.category_content import CategoryContentHandler
from services.contracts import AdminPageRegistrar, PageHandler

logger = logging.getLogger(__name__)

ContentHandlerFactory = Callable[[AsyncSession], CategoryContentHandler]


def build_path_key(namespace: str, identifier: str) -> str:
    return f"{namespace}/{identifier}"


def page_title(definition: CategoryDefinition) -> str:
    return f"{definition.display_name} Content"


def make_category_handler(
    definition: CategoryDefinition,
    content_handler_factory: ContentHandlerFactory = CategoryContentHandler.for_session,
) -> PageHandler:
    """Page handler bound to exactly this definition."""

    async def handle_category_page(db_session: AsyncSession) -> str:
        content_handler = content_handler_factory(db_session)
        return await content_handler.handle(
            definition.identifier,
            definition.item_limit,
            definition.display_name,
        )

    return handle_category_page


class RouteRegistrar:
    """Registers category pages with the host's admin page registry."""

    def __init__(
        self,
        pages: AdminPageRegistrar,
        namespace: str,
        content_handler_factory: ContentHandlerFactory = CategoryContentHandler.for_session,
    ):
        self.pages = pages
        self.namespace = namespace
        self.content_handler_factory = content_handler_factory

    def register_routes(self, registry: CategoryRegistry, permission_level: str) -> None:
        """
        Register one page per category, in registry order.

        Args:
            registry: Validated categories
            permission_level: Capability required for every category page
        """
        for definition in registry.snapshot():
            path_key = build_path_key(self.namespace, definition.identifier)
            title = page_title(definition)
            self.pages.register_admin_page(
                title,
                title,
                permission_level,
                path_key,
                make_category_handler(definition, self.content_handler_factory),
            )
            logger.debug(f"Registered admin page '{path_key}'", extra={"path_key": path_key})

        logger.info(
            f"Registered {len(registry)} category admin pages",
            extra={"capability": permission_level},
        )
