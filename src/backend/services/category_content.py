"""
Category content page rendering.

Queries the content store for a category's most recent published posts
and renders them as a list table, or a placeholder when there are none.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from admin.templates import CATEGORY_PAGE_TEMPLATE
from database.repositories import PostRepository, UserRepository
from services.contracts import AuthorResolver, ContentItem, ContentQuery, ContentStore


def format_post_date(value: Any) -> str:
    """Render a post date the way the admin list tables show it."""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return str(value)


class CategoryContentHandler:
    """Builds the admin page for one category."""

    def __init__(self, content_store: ContentStore, authors: AuthorResolver, taxonomy_kind: str = "category"):
        self.content_store = content_store
        self.authors = authors
        self.taxonomy_kind = taxonomy_kind

    @classmethod
    def for_session(cls, db_session: AsyncSession, taxonomy_kind: str = "category") -> "CategoryContentHandler":
        """Handler backed by the host repositories on a request session."""
        return cls(PostRepository(db_session), UserRepository(db_session), taxonomy_kind)

    def build_query(self, identifier: str, item_limit: int) -> ContentQuery:
        """Newest published posts first, at most item_limit of them."""
        return ContentQuery(
            category=identifier,
            limit=item_limit,
            status="publish",
            order_by="date",
            order_direction="DESC",
            taxonomy=self.taxonomy_kind,
        )

    async def _build_rows(self, items: List[ContentItem]) -> List[Dict[str, Any]]:
        display_names: Dict[Any, str] = {}
        rows = []
        for item in items:
            if item.author_id not in display_names:
                display_names[item.author_id] = await self.authors.resolve_author_display_name(item.author_id)
            rows.append({
                "id": item.id,
                "title": item.title,
                "author": display_names[item.author_id],
                "date": format_post_date(item.published_date),
            })
        return rows

    async def handle(self, identifier: str, item_limit: int, display_name: Optional[str] = None) -> str:
        """
        Query and render a category's posts.

        Rows keep the order the content store returned. An empty result
        (including one caused by a store that found nothing) renders the
        "no posts" placeholder instead of a table.

        Args:
            identifier: Category slug
            item_limit: Maximum number of posts to list
            display_name: Heading/placeholder name (defaults to the slug)

        Returns:
            Page body markup
        """
        display_name = display_name or identifier
        items = await self.content_store.query_content(self.build_query(identifier, item_limit))
        rows = await self._build_rows(items)
        return CATEGORY_PAGE_TEMPLATE.render(display_name=display_name, rows=rows)
