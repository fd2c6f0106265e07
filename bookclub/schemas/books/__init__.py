from .book_schemas import BookCreate, BookResponse, BookUpdate
from .portal_schemas import PortalStatusCreate, PortalStatusResponse, PortalStatusUpdate, UpcomingPeriodResponse
from .suggestion_schemas import SuggestionCreate, SuggestionResponse
from .vote_schemas import UserVotesResponse, VoteResponse, VoteResultResponse

__all__ = [
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "PortalStatusCreate",
    "PortalStatusUpdate",
    "PortalStatusResponse",
    "UpcomingPeriodResponse",
    "SuggestionCreate",
    "SuggestionResponse",
    "VoteResponse",
    "VoteResultResponse",
    "UserVotesResponse",
]
