"""
Domain errors raised by the book club services.

Every error carries the HTTP status and the stable error code the API
layer responds with, so routes never build HTTPExceptions for domain
failures themselves.
"""

# Standard library imports
from typing import Any

DetailsType = str | list[str] | dict[str, Any]


class BookClubError(Exception):
    status_code: int = 500
    code: str = "internal_server_error"
    default_message: str = "An unexpected error occurred. Please try again later."

    def __init__(self, message: str | None = None, details: DetailsType | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class Unauthenticated(BookClubError):
    status_code = 401
    code = "unauthorized"
    default_message = "Authentication required"


class Forbidden(BookClubError):
    status_code = 403
    code = "forbidden"
    default_message = "You don't have permission to perform this action"


class ValidationError(BookClubError):
    status_code = 400
    code = "bad_request"
    default_message = "Invalid request data"


class PortalClosed(BookClubError):
    status_code = 400
    code = "portal_closed"
    default_message = "The portal is closed for this period"


class QuotaExceeded(BookClubError):
    status_code = 400
    code = "quota_exceeded"
    default_message = "You have reached your suggestion limit for this period"


class AlreadyVoted(BookClubError):
    status_code = 400
    code = "already_voted"
    default_message = "You have already voted for this book"


class NotFound(BookClubError):
    status_code = 404
    code = "not_found"
    default_message = "Resource not found"


class DuplicateKind(BookClubError):
    status_code = 400
    code = "duplicate_kind"
    default_message = "A portal status already exists for this period"


class StoreUnavailable(BookClubError):
    status_code = 500
    code = "store_unavailable"
    default_message = "The data store is unavailable. Please try again later."


class AlreadySelected(BookClubError):
    status_code = 400
    code = "already_selected"
    default_message = "A book has already been selected for this period"
