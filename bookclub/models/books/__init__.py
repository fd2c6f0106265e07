from .book import Book
from .enums import BookCategory
from .portal_status import PortalStatus
from .suggestion import Suggestion
from .vote import Vote

__all__ = [
    "Book",
    "BookCategory",
    "PortalStatus",
    "Suggestion",
    "Vote",
]
