"""Database package for the host platform's content tables."""

from .models import (
    Base,
    User,
    Term,
    Post,
    PostStatusEnum,
    post_terms,
)

__all__ = [
    "Base",
    "User",
    "Term",
    "Post",
    "PostStatusEnum",
    "post_terms",
]
