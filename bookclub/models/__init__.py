"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from bookclub.models.base import Base
from bookclub.models.books import Book, BookCategory, PortalStatus, Suggestion, Vote

__all__ = [
    "Base",
    # Book club models
    "Book",
    "BookCategory",
    "PortalStatus",
    "Suggestion",
    "Vote",
]
