"""
Role based access policy.

Every service operation is listed once in POLICY with the minimum role it
needs. Services call `authorize` at their entry point with the caller's
Identity, which the API layer resolves from the bearer token and passes
down explicitly.
"""

# Standard library imports
from dataclasses import dataclass
import enum
from uuid import UUID

# Local application imports
from bookclub.services.exceptions import Forbidden, Unauthenticated


class Role(str, enum.Enum):
    MEMBER = "member"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def at_least(self, other: "Role") -> bool:
        return self.rank >= other.rank


_ROLE_RANK = {
    Role.MEMBER: 0,
    Role.ADMIN: 1,
    Role.SUPER_ADMIN: 2,
}


class Operation(str, enum.Enum):
    # Portal State Store
    PORTAL_LIST = "portal.list"
    PORTAL_CREATE = "portal.create"
    PORTAL_TOGGLE = "portal.toggle"
    # Suggestion Ledger
    SUGGESTION_SUBMIT = "suggestion.submit"
    SUGGESTION_LIST = "suggestion.list"
    SUGGESTION_LIST_ALL = "suggestion.list_all"
    SUGGESTION_DELETE = "suggestion.delete"
    # Voting Engine
    VOTE_CAST = "vote.cast"
    VOTE_LIST_OWN = "vote.list_own"
    # Selection Finalizer
    SELECTION_SELECT_WINNER = "selection.select_winner"
    # Book catalog
    BOOK_CREATE = "book.create"
    BOOK_UPDATE = "book.update"
    BOOK_DELETE = "book.delete"


# Administrative operations uniformly require `admin`; super_admin inherits it.
POLICY: dict[Operation, Role] = {
    Operation.PORTAL_LIST: Role.MEMBER,
    Operation.PORTAL_CREATE: Role.ADMIN,
    Operation.PORTAL_TOGGLE: Role.ADMIN,
    Operation.SUGGESTION_SUBMIT: Role.MEMBER,
    Operation.SUGGESTION_LIST: Role.MEMBER,
    Operation.SUGGESTION_LIST_ALL: Role.ADMIN,
    Operation.SUGGESTION_DELETE: Role.ADMIN,
    Operation.VOTE_CAST: Role.MEMBER,
    Operation.VOTE_LIST_OWN: Role.MEMBER,
    Operation.SELECTION_SELECT_WINNER: Role.ADMIN,
    Operation.BOOK_CREATE: Role.ADMIN,
    Operation.BOOK_UPDATE: Role.ADMIN,
    Operation.BOOK_DELETE: Role.ADMIN,
}


@dataclass(frozen=True)
class Identity:
    """The caller as reported by the identity provider."""

    user_id: UUID
    role: Role


def required_role(operation: Operation) -> Role:
    return POLICY[operation]


def authorize(identity: Identity | None, operation: Operation) -> Identity:
    """
    Check that `identity` may perform `operation`.

    Args:
        identity: The caller, or None when there is no valid session.
        operation: The operation being attempted.

    Returns:
        The same identity, narrowed to non-None.

    Raises:
        Unauthenticated: If there is no identity.
        Forbidden: If the identity's role is below the operation's minimum.
    """
    if identity is None:
        raise Unauthenticated()
    minimum = POLICY[operation]
    if not identity.role.at_least(minimum):
        raise Forbidden(f"The '{operation.value}' operation requires the {minimum.value} role")
    return identity
