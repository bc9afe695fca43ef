"""
Repository pattern for database operations.

Read-only access to the host platform's taxonomy, content and user
tables. Each repository implements one of the capabilities declared in
services/contracts.py.
"""

from typing import Any, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Term, Post, User, post_terms
from services.contracts import ContentItem, ContentQuery


class TermRepository:
    """Repository for taxonomy Term lookups."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def lookup_term_by_slug(self, slug: str, taxonomy_kind: str = "category") -> Optional[Term]:
        """Get the term with this slug in the given taxonomy, or None."""
        result = await self.session.execute(
            select(Term).where(Term.slug == slug, Term.taxonomy == taxonomy_kind)
        )
        return result.scalar_one_or_none()


class PostRepository:
    """Repository for Post queries."""

    ORDER_COLUMNS = {
        "date": Post.post_date,
        "title": Post.title,
        "id": Post.id,
    }

    def __init__(self, session: AsyncSession):
        self.session = session

    def build_statement(self, query: ContentQuery):
        """
        Build the SELECT for a content query.

        Args:
            query: Status, category slug, ordering and limit

        Returns:
            SQLAlchemy Select over posts joined to their terms
        """
        order_column = self.ORDER_COLUMNS.get(query.order_by, Post.post_date)
        if query.order_direction.upper() == "ASC":
            ordering = order_column.asc()
        else:
            ordering = order_column.desc()

        return (
            select(Post)
            .join(post_terms, post_terms.c.post_id == Post.id)
            .join(Term, Term.id == post_terms.c.term_id)
            .where(
                Post.status == query.status,
                Term.slug == query.category,
                Term.taxonomy == query.taxonomy,
            )
            .order_by(ordering, Post.id.desc())
            .limit(query.limit)
        )

    async def query_content(self, query: ContentQuery) -> List[ContentItem]:
        """Run a content query; returns items in the query's order, possibly empty."""
        result = await self.session.execute(self.build_statement(query))
        return [
            ContentItem(
                id=post.id,
                title=post.title,
                author_id=post.author_id,
                published_date=post.post_date,
            )
            for post in result.scalars().all()
        ]


class UserRepository:
    """Repository for User lookups."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def resolve_author_display_name(self, author_id: Any) -> str:
        """Display name for an author; empty string when the user is gone."""
        result = await self.session.execute(
            select(User.display_name).where(User.id == author_id)
        )
        display_name = result.scalar_one_or_none()
        return display_name or ""
