# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db.store_errors import store_errors
from bookclub.core.monitoring.logging import get_contextual_logger
from bookclub.models.books.book import Book
from bookclub.models.books.portal_status import PortalStatus
from bookclub.models.books.suggestion import Suggestion
from bookclub.services.access import Identity, Operation, authorize
from bookclub.services.exceptions import AlreadySelected, NotFound
from bookclub.utils.period_utils import Period


async def select_winner(db: AsyncSession, actor: Identity | None, suggestion_id: UUID) -> Book:
    """
    Promote a suggestion into the book catalog and close its portal.

    The new Book and the closed portal commit in one transaction, so a
    failure leaves neither applied. The other suggestions of the period
    are kept as history.

    Args:
        db: The current database session.
        actor: The administrator making the selection.
        suggestion_id: The winning suggestion.

    Returns:
        The created Book, marked as selected.

    Raises:
        NotFound: If the suggestion does not exist.
        AlreadySelected: If the period already has a selected book.
    """
    actor = authorize(actor, Operation.SELECTION_SELECT_WINNER)
    logger = get_contextual_logger(__name__, user_id=actor.user_id, suggestion_id=suggestion_id)

    async with store_errors(db, "select a winning suggestion"):
        suggestion = await db.get(Suggestion, suggestion_id)
        if suggestion is None:
            raise NotFound("Suggestion not found")

        period = Period(category=suggestion.category, month=suggestion.month, year=suggestion.year).normalize()
        selected = await db.execute(
            select(Book.id).where(
                Book.is_selected.is_(True),
                Book.category == period.category,
                Book.month == period.month,
                Book.year == period.year,
            )
        )
        if selected.first() is not None:
            raise AlreadySelected(f"A book has already been selected for {period.label}")

        book = Book(
            title=suggestion.title,
            author=suggestion.author,
            synopsis=suggestion.synopsis,
            image_url=suggestion.image_url,
            category=suggestion.category,
            month=suggestion.month,
            year=suggestion.year,
            is_selected=True,
        )
        db.add(book)
        await db.flush()

        result = await db.execute(
            update(PortalStatus)
            .where(
                PortalStatus.category == period.category,
                PortalStatus.month == period.month,
                PortalStatus.year == period.year,
            )
            .values(nomination_open=False, voting_open=False)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning(f"No portal status to close for {period.label}")

        await db.commit()

    logger.info(f"Winner selected for {period.label}: {book.title} ({suggestion.vote_count} votes)")
    return book
