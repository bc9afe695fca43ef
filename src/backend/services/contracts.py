"""
Contracts between the category listing extension and the host platform.

The extension never talks to the database or the admin UI directly; it
depends on these narrow capabilities, which the host implements in
database/repositories.py and admin/.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Awaitable, Callable, List, Optional, Protocol, Union

from sqlalchemy.ext.asyncio import AsyncSession


@dataclass(frozen=True)
class ContentQuery:
    """Filter handed to the content store."""
    category: str
    limit: int
    status: str = "publish"
    order_by: str = "date"
    order_direction: str = "DESC"
    taxonomy: str = "category"


@dataclass(frozen=True)
class ContentItem:
    """Read-only projection of a host content record."""
    id: int
    title: str
    author_id: Any
    published_date: Union[datetime, str]


class Term(Protocol):
    name: str


class TermLookup(Protocol):
    async def lookup_term_by_slug(self, slug: str, taxonomy_kind: str) -> Optional[Term]:
        ...


class ContentStore(Protocol):
    async def query_content(self, query: ContentQuery) -> List[ContentItem]:
        ...


class AuthorResolver(Protocol):
    async def resolve_author_display_name(self, author_id: Any) -> str:
        ...


# Handlers receive the request-scoped session and return page markup
PageHandler = Callable[[AsyncSession], Awaitable[str]]

NoticeCallback = Callable[[], str]


class AdminPageRegistrar(Protocol):
    def register_admin_page(
        self,
        title: str,
        menu_title: str,
        capability: str,
        path_key: str,
        handler: PageHandler,
    ) -> Any:
        ...


class NoticeScheduler(Protocol):
    def register_deferred_notice(self, callback: NoticeCallback) -> None:
        ...
