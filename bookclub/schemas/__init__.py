"""
Pydantic schemas package.

This package contains all Pydantic schemas for request/response
validation and serialization.
"""

# Local application imports
from bookclub.schemas.books import (
    BookCreate,
    BookResponse,
    BookUpdate,
    PortalStatusCreate,
    PortalStatusResponse,
    PortalStatusUpdate,
    SuggestionCreate,
    SuggestionResponse,
    UserVotesResponse,
    VoteResponse,
    VoteResultResponse,
)
from bookclub.schemas.common import ErrorResponse, SuccessResponse

__all__ = [
    # Book club schemas
    "BookCreate",
    "BookResponse",
    "BookUpdate",
    "PortalStatusCreate",
    "PortalStatusResponse",
    "PortalStatusUpdate",
    "SuggestionCreate",
    "SuggestionResponse",
    "UserVotesResponse",
    "VoteResponse",
    "VoteResultResponse",
    # Common schemas
    "ErrorResponse",
    "SuccessResponse",
]
