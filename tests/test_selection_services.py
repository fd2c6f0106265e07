# Standard library imports
from uuid import uuid4

# Third-party imports
import pytest
from sqlalchemy import select, update

# Local application imports
from bookclub.models import Book, BookCategory, Suggestion
from bookclub.services.access import Identity, Role
from bookclub.services.books import (
    cast_vote,
    create_portal_status,
    get_portal_status,
    list_suggestions,
    select_winner,
    set_voting_open,
    submit_suggestion,
)
from bookclub.services.exceptions import AlreadySelected, AlreadyVoted, Forbidden, NotFound, QuotaExceeded
from bookclub.utils.period_utils import Period
from tests.factories import SYNOPSIS, make_suggestion


async def _books(session_factory) -> list[Book]:
    async with session_factory() as session:
        return list((await session.execute(select(Book))).scalars().all())


async def test_select_winner_creates_book_and_closes_portal(
    db, session_factory, admin, member, nomination_portal, fiction_june
):
    suggestion = await submit_suggestion(db, member, make_suggestion(image_url="https://covers.example.com/1.jpg"))
    await set_voting_open(db, admin, nomination_portal.id, True)
    async with session_factory() as session:
        await session.execute(update(Suggestion).where(Suggestion.id == suggestion.id).values(vote_count=7))
        await session.commit()

    book = await select_winner(db, admin, suggestion.id)

    assert book.title == suggestion.title
    assert book.author == suggestion.author
    assert book.synopsis == SYNOPSIS
    assert book.image_url == "https://covers.example.com/1.jpg"
    assert book.is_selected is True
    assert (book.category, book.month, book.year) == (BookCategory.FICTION, 6, 2025)

    books = await _books(session_factory)
    assert [b.id for b in books] == [book.id]

    status = await get_portal_status(db, fiction_june)
    assert status.nomination_open is False
    assert status.voting_open is False

    # The competing suggestions stay as history
    assert len(await list_suggestions(db, member, fiction_june)) == 1


async def test_select_winner_for_non_fiction_closes_start_month_portal(db, admin, member):
    portal = await create_portal_status(db, admin, Period(BookCategory.NON_FICTION, 3, 2025), nomination_open=True)
    suggestion = await submit_suggestion(
        db, member, make_suggestion(period=Period(BookCategory.NON_FICTION, 4, 2025))
    )
    await set_voting_open(db, admin, portal.id, True)

    book = await select_winner(db, admin, suggestion.id)

    assert book.month == 3
    status = await get_portal_status(db, Period(BookCategory.NON_FICTION, 4, 2025))
    assert status.voting_open is False


async def test_select_winner_requires_admin(db, session_factory, member, nomination_portal):
    suggestion = await submit_suggestion(db, member, make_suggestion())

    with pytest.raises(Forbidden):
        await select_winner(db, member, suggestion.id)
    assert await _books(session_factory) == []


async def test_select_missing_suggestion(db, session_factory, admin):
    with pytest.raises(NotFound):
        await select_winner(db, admin, uuid4())
    assert await _books(session_factory) == []


async def test_book_club_month_on_one_session(db, admin, member, other_member, nomination_portal, fiction_june):
    """The whole fiction month driven through a single session."""
    third_voter = Identity(user_id=uuid4(), role=Role.MEMBER)
    submitted = [await submit_suggestion(db, member, make_suggestion(title=f"Pick {i}")) for i in range(3)]

    with pytest.raises(QuotaExceeded):
        await submit_suggestion(db, member, make_suggestion(title="Pick 4"))

    await set_voting_open(db, admin, nomination_portal.id, True)
    winner = submitted[0]
    await cast_vote(db, other_member, winner.id)
    result = await cast_vote(db, third_voter, winner.id)
    assert result.vote_count == 2

    with pytest.raises(AlreadyVoted):
        await cast_vote(db, other_member, winner.id)

    book = await select_winner(db, admin, winner.id)

    assert (book.title, book.month, book.year, book.is_selected) == (winner.title, 6, 2025, True)
    status = await get_portal_status(db, fiction_june)
    assert (status.nomination_open, status.voting_open) == (False, False)


async def test_second_selection_for_period_rejected(db, session_factory, admin, member, nomination_portal):
    first = await submit_suggestion(db, member, make_suggestion(title="First"))
    second = await submit_suggestion(db, member, make_suggestion(title="Second"))
    await select_winner(db, admin, first.id)

    with pytest.raises(AlreadySelected):
        await select_winner(db, admin, first.id)
    with pytest.raises(AlreadySelected):
        await select_winner(db, admin, second.id)

    assert [b.title for b in await _books(session_factory)] == ["First"]
