"""
Admin page registry.

Host-side store of administrative pages. Pages are keyed by path key;
registering the same key again replaces the page in place, so a reload
re-registering identical pages leaves menu order unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional

from services.contracts import PageHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminPage:
    """A permissioned admin page reachable at /admin/{path_key}."""
    title: str
    menu_title: str
    capability: str
    path_key: str
    handler: PageHandler

    def allowed_for(self, capabilities: FrozenSet[str]) -> bool:
        return self.capability in capabilities


class AdminPageRegistry:
    """Registered admin pages, in registration order."""

    def __init__(self):
        self._pages: Dict[str, AdminPage] = {}

    def register_admin_page(
        self,
        title: str,
        menu_title: str,
        capability: str,
        path_key: str,
        handler: PageHandler,
    ) -> AdminPage:
        """Register (or replace) the page at path_key."""
        page = AdminPage(
            title=title,
            menu_title=menu_title,
            capability=capability,
            path_key=path_key,
            handler=handler,
        )
        if path_key in self._pages:
            logger.debug(f"Replacing admin page '{path_key}'", extra={"path_key": path_key})
        self._pages[path_key] = page
        return page

    def get(self, path_key: str) -> Optional[AdminPage]:
        return self._pages.get(path_key)

    def pages(self) -> List[AdminPage]:
        return list(self._pages.values())

    def menu_for(self, capabilities: FrozenSet[str]) -> List[AdminPage]:
        """Pages visible to a caller holding these capabilities."""
        return [page for page in self._pages.values() if page.allowed_for(capabilities)]

    def clear(self):
        self._pages.clear()


# Global page registry instance
page_registry = AdminPageRegistry()
