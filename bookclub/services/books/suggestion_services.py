# Standard library imports
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

# Third-party imports
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db.store_errors import store_errors
from bookclub.core.monitoring.logging import get_contextual_logger
from bookclub.models.books.suggestion import Suggestion
from bookclub.models.books.vote import Vote
from bookclub.schemas.books.suggestion_schemas import SuggestionCreate, SuggestionResponse
from bookclub.services.access import Identity, Operation, authorize
from bookclub.services.books.portal_services import find_portal_status
from bookclub.services.exceptions import NotFound, PortalClosed, QuotaExceeded, ValidationError
from bookclub.utils.period_utils import Period

MAX_SUGGESTIONS_PER_PERIOD = 3
SYNOPSIS_MIN_LENGTH = 50
SYNOPSIS_MAX_LENGTH = 1000

# Most votes first; the earliest submission wins a tie
LEADERBOARD_ORDER = (Suggestion.vote_count.desc(), Suggestion.created_at.asc(), Suggestion.id.asc())


def _period_filter(period: Period) -> tuple:
    return (
        Suggestion.category == period.category,
        Suggestion.month == period.month,
        Suggestion.year == period.year,
    )


def validate_suggestion_fields(title: str, author: str, synopsis: str) -> dict[str, str]:
    """
    Check the free-text fields of a suggestion after trimming.

    Returns:
        A mapping of field name to error message; empty when valid.
    """
    errors: dict[str, str] = {}
    if not title.strip():
        errors["title"] = "Title is required"
    if not author.strip():
        errors["author"] = "Author is required"

    synopsis = synopsis.strip()
    if not synopsis:
        errors["synopsis"] = "Synopsis is required"
    elif len(synopsis) < SYNOPSIS_MIN_LENGTH:
        errors["synopsis"] = f"Synopsis must be at least {SYNOPSIS_MIN_LENGTH} characters"
    elif len(synopsis) > SYNOPSIS_MAX_LENGTH:
        errors["synopsis"] = f"Synopsis must be at most {SYNOPSIS_MAX_LENGTH} characters"
    return errors


async def count_user_suggestions(db: AsyncSession, user_id: UUID, period: Period) -> int:
    result = await db.execute(
        select(func.count(Suggestion.id)).where(Suggestion.user_id == user_id, *_period_filter(period.normalize()))
    )
    return result.scalar_one()


async def submit_suggestion(db: AsyncSession, actor: Identity | None, payload: SuggestionCreate) -> Suggestion:
    """
    Nominate a book for a period.

    Checks run in this order, each with its own error: the nomination
    window must be open (PortalClosed), the member must hold fewer than
    three suggestions for the period (QuotaExceeded), and the text fields
    must be valid (ValidationError).
    """
    actor = authorize(actor, Operation.SUGGESTION_SUBMIT)
    period = Period(category=payload.category, month=payload.month, year=payload.year).normalize()
    logger = get_contextual_logger(__name__, user_id=actor.user_id, period=period)

    async with store_errors(db, "submit a suggestion"):
        portal = await find_portal_status(db, period)
        if portal is None or not portal.nomination_open:
            raise PortalClosed(f"Nominations are closed for {period.label}")

        held = await count_user_suggestions(db, actor.user_id, period)
        if held >= MAX_SUGGESTIONS_PER_PERIOD:
            raise QuotaExceeded(f"You can only suggest {MAX_SUGGESTIONS_PER_PERIOD} books per period")

        errors = validate_suggestion_fields(payload.title, payload.author, payload.synopsis)
        if errors:
            raise ValidationError("; ".join(errors.values()), details=errors)

        suggestion = Suggestion(
            user_id=actor.user_id,
            title=payload.title.strip(),
            author=payload.author.strip(),
            synopsis=payload.synopsis.strip(),
            image_url=(payload.image_url or "").strip() or None,
            category=period.category,
            month=period.month,
            year=period.year,
            vote_count=0,
        )
        db.add(suggestion)
        await db.commit()

    logger.info(f"Suggestion submitted: {suggestion.title} ({held + 1}/{MAX_SUGGESTIONS_PER_PERIOD})")
    return suggestion


async def list_suggestions(db: AsyncSession, actor: Identity | None, period: Period) -> Sequence[Suggestion]:
    """The leaderboard for a period."""
    authorize(actor, Operation.SUGGESTION_LIST)
    period = period.normalize()
    async with store_errors(db, "list suggestions"):
        query = (
            select(Suggestion)
            .where(*_period_filter(period))
            .order_by(*LEADERBOARD_ORDER)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalars().all()


async def list_all_suggestions(db: AsyncSession, actor: Identity | None) -> Sequence[Suggestion]:
    authorize(actor, Operation.SUGGESTION_LIST_ALL)
    async with store_errors(db, "list all suggestions"):
        result = await db.execute(
            select(Suggestion).order_by(*LEADERBOARD_ORDER).execution_options(populate_existing=True)
        )
        return result.scalars().all()


async def get_suggestion(db: AsyncSession, suggestion_id: UUID) -> Suggestion:
    async with store_errors(db, "load a suggestion"):
        suggestion = await db.get(Suggestion, suggestion_id)
    if suggestion is None:
        raise NotFound("Suggestion not found")
    return suggestion


async def delete_suggestion(db: AsyncSession, actor: Identity | None, suggestion_id: UUID) -> None:
    """Delete a suggestion and the votes cast for it."""
    actor = authorize(actor, Operation.SUGGESTION_DELETE)
    logger = get_contextual_logger(__name__, user_id=actor.user_id, suggestion_id=suggestion_id)

    async with store_errors(db, "delete a suggestion"):
        suggestion = await db.get(Suggestion, suggestion_id)
        if suggestion is None:
            raise NotFound("Suggestion not found")

        await db.execute(delete(Vote).where(Vote.suggestion_id == suggestion_id))
        await db.delete(suggestion)
        await db.commit()

    logger.info("Suggestion deleted")


def _leaderboard_key(suggestion: Any) -> tuple:
    created_at: datetime = suggestion.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return (-suggestion.vote_count, created_at, suggestion.id)


def rank_suggestions(suggestions: Iterable[Any]) -> list[Any]:
    """Apply the leaderboard ordering to suggestions already in memory."""
    return sorted(suggestions, key=_leaderboard_key)


def rerank(suggestions: Iterable[SuggestionResponse], suggestion_id: UUID, vote_count: int) -> list[SuggestionResponse]:
    """
    Re-rank a leaderboard after a vote, using the count returned by
    cast_vote instead of querying the store again.
    """
    updated = [
        s.model_copy(update={"vote_count": vote_count}) if s.id == suggestion_id else s for s in suggestions
    ]
    return rank_suggestions(updated)
