from .book_services import create_book, delete_book, get_book, list_books, update_book
from .portal_services import (
    create_portal_status,
    UpcomingPeriod,
    find_portal_status,
    get_nominating_portal_status,
    get_portal_status,
    list_portal_statuses,
    list_upcoming_periods,
    set_nomination_open,
    set_voting_open,
    update_portal_status,
)
from .selection_services import select_winner
from .suggestion_services import (
    MAX_SUGGESTIONS_PER_PERIOD,
    delete_suggestion,
    get_suggestion,
    list_all_suggestions,
    list_suggestions,
    rank_suggestions,
    rerank,
    submit_suggestion,
)
from .vote_services import VoteResult, cast_vote, list_user_votes

__all__ = [
    "MAX_SUGGESTIONS_PER_PERIOD",
    "UpcomingPeriod",
    "VoteResult",
    "cast_vote",
    "create_book",
    "create_portal_status",
    "delete_book",
    "delete_suggestion",
    "find_portal_status",
    "get_book",
    "get_nominating_portal_status",
    "get_portal_status",
    "get_suggestion",
    "list_all_suggestions",
    "list_books",
    "list_portal_statuses",
    "list_suggestions",
    "list_upcoming_periods",
    "list_user_votes",
    "rank_suggestions",
    "rerank",
    "select_winner",
    "set_nomination_open",
    "set_voting_open",
    "submit_suggestion",
    "update_book",
    "update_portal_status",
]
