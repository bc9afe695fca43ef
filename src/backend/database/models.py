"""
SQLAlchemy models for the host platform's content tables.

The host platform owns this schema; the admin extension only reads it.
Terms belong to a taxonomy (e.g. "category") and are attached to posts
through the post_terms association table.
"""

from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, Index, Table,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, relationship
import enum


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class PostStatusEnum(str, enum.Enum):
    """Publication status of a post."""
    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"


post_terms = Table(
    "post_terms",
    Base.metadata,
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("term_id", Integer, ForeignKey("terms.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    """Platform user; authors posts."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    login = Column(String(60), nullable=False, unique=True)
    display_name = Column(String(250), nullable=False, default="")

    posts = relationship("Post", back_populates="author")


class Term(Base):
    """
    Taxonomy term.

    A slug is unique within its taxonomy, so (slug, taxonomy) identifies
    at most one term.
    """
    __tablename__ = "terms"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False)
    taxonomy = Column(String(32), nullable=False, default="category")
    description = Column(Text, nullable=True)

    posts = relationship("Post", secondary=post_terms, back_populates="terms")

    __table_args__ = (
        UniqueConstraint("slug", "taxonomy", name="uq_terms_slug_taxonomy"),
        Index("ix_terms_taxonomy", "taxonomy"),
    )


class Post(Base):
    """Content item shown on the category admin pages once published."""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(String(20), nullable=False, default=PostStatusEnum.DRAFT.value)

    post_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    modified_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    author = relationship("User", back_populates="posts")
    terms = relationship("Term", secondary=post_terms, back_populates="posts")

    __table_args__ = (
        Index("ix_posts_status_post_date", "status", "post_date"),
        Index("ix_posts_author_id", "author_id"),
    )
