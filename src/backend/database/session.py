"""
Database session management for async SQLAlchemy operations.

The admin extension only reads the host's taxonomy, post and user
tables, so every session it opens runs in a READ ONLY transaction that
is rolled back when the caller is done.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from config import settings


# Create async engine
engine = create_async_engine(
    settings.async_database_url,
    echo=False,  # Set to True for SQL query logging during development
    pool_size=5,
    max_overflow=10,
    pool_pre_ping=True,  # Verify connections before using
)

# Create async session factory
AsyncSessionFactory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

READ_ONLY_TRANSACTION = "SET TRANSACTION READ ONLY"


@asynccontextmanager
async def read_only_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Open a session whose transaction rejects writes.

    Used by the startup category validation and by every admin page
    request. Nothing is ever committed.
    """
    async with AsyncSessionFactory() as session:
        await session.execute(text(READ_ONLY_TRANSACTION))
        try:
            yield session
        finally:
            await session.rollback()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for read-only database sessions.

    Example:
        @app.get("/admin/{path_key:path}")
        async def admin_page(path_key: str, db: AsyncSession = Depends(get_db)):
            ...
    """
    async with read_only_session() as session:
        yield session
