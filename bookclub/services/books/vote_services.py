# Standard library imports
from dataclasses import dataclass
from uuid import UUID

# Third-party imports
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db.store_errors import store_errors
from bookclub.core.monitoring.logging import get_contextual_logger
from bookclub.models.books.suggestion import Suggestion
from bookclub.models.books.vote import Vote
from bookclub.services.access import Identity, Operation, authorize
from bookclub.services.books.portal_services import find_portal_status
from bookclub.services.exceptions import AlreadyVoted, NotFound, PortalClosed
from bookclub.utils.period_utils import Period


@dataclass(frozen=True)
class VoteResult:
    vote: Vote
    vote_count: int


async def _has_voted(db: AsyncSession, user_id: UUID, suggestion_id: UUID) -> bool:
    result = await db.execute(select(Vote.id).where(Vote.user_id == user_id, Vote.suggestion_id == suggestion_id))
    return result.scalar_one_or_none() is not None


async def cast_vote(db: AsyncSession, actor: Identity | None, suggestion_id: UUID) -> VoteResult:
    """
    Record the caller's vote for a suggestion and bump its counter.

    The vote row and the counter increment commit together. Uniqueness of
    (user, suggestion) is guaranteed by the votes table's unique
    constraint; the lookup beforehand only gives the common case a
    cheaper error. The counter is incremented in SQL, never read and
    written back from Python.

    Members may vote for several suggestions in the same period, but only
    once for each of them.

    Returns:
        The new vote and the suggestion's vote count after it.

    Raises:
        NotFound: If the suggestion does not exist.
        PortalClosed: If voting is not open for the suggestion's period.
        AlreadyVoted: If the caller already voted for this suggestion.
    """
    actor = authorize(actor, Operation.VOTE_CAST)
    logger = get_contextual_logger(__name__, user_id=actor.user_id, suggestion_id=suggestion_id)

    async with store_errors(db, "cast a vote"):
        suggestion = await db.get(Suggestion, suggestion_id)
        if suggestion is None:
            raise NotFound("Suggestion not found")

        period = Period(category=suggestion.category, month=suggestion.month, year=suggestion.year)
        portal = await find_portal_status(db, period)
        if portal is None or not portal.voting_open:
            raise PortalClosed(f"Voting is closed for {period.normalize().label}")

        if await _has_voted(db, actor.user_id, suggestion_id):
            raise AlreadyVoted()

        vote = Vote(user_id=actor.user_id, suggestion_id=suggestion_id)
        db.add(vote)
        try:
            await db.flush()
        except IntegrityError as e:
            await db.rollback()
            if await _has_voted(db, actor.user_id, suggestion_id):
                logger.info("Concurrent duplicate vote rejected")
                raise AlreadyVoted() from e
            raise NotFound("Suggestion not found") from e

        result = await db.execute(
            update(Suggestion)
            .where(Suggestion.id == suggestion_id)
            .values(vote_count=Suggestion.vote_count + 1)
            .returning(Suggestion.vote_count)
            .execution_options(synchronize_session=False)
        )
        vote_count = result.scalar_one_or_none()
        if vote_count is None:
            raise NotFound("Suggestion not found")
        await db.commit()

    logger.info(f"Vote recorded, suggestion now has {vote_count} votes")
    return VoteResult(vote=vote, vote_count=vote_count)


async def list_user_votes(db: AsyncSession, actor: Identity | None, period: Period) -> list[UUID]:
    """Ids of the suggestions the caller voted for in a period."""
    actor = authorize(actor, Operation.VOTE_LIST_OWN)
    period = period.normalize()
    async with store_errors(db, "list votes"):
        result = await db.execute(
            select(Vote.suggestion_id)
            .join(Suggestion, Suggestion.id == Vote.suggestion_id)
            .where(
                Vote.user_id == actor.user_id,
                Suggestion.category == period.category,
                Suggestion.month == period.month,
                Suggestion.year == period.year,
            )
            .order_by(Vote.created_at.asc())
        )
        return list(result.scalars().all())
