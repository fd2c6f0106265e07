# Standard library imports
from uuid import uuid4

# Third-party imports
import pytest

# Local application imports
from bookclub.models import BookCategory
from bookclub.schemas.books import BookCreate, BookUpdate
from bookclub.services.books import create_book, delete_book, get_book, list_books, update_book
from bookclub.services.exceptions import Forbidden, NotFound, ValidationError


def _book(title: str = "Middlemarch", **overrides) -> BookCreate:
    data = {
        "title": title,
        "author": "George Eliot",
        "synopsis": None,
        "category": BookCategory.FICTION,
        "month": 6,
        "year": 2025,
    }
    data.update(overrides)
    return BookCreate(**data)


async def test_create_and_get_book(db, admin):
    book = await create_book(db, admin, _book(title="  Middlemarch "))

    fetched = await get_book(db, book.id)
    assert fetched.title == "Middlemarch"
    assert fetched.is_selected is True


async def test_create_book_rejects_blank_author(db, admin):
    with pytest.raises(ValidationError):
        await create_book(db, admin, _book(author="   "))


async def test_member_cannot_create_book(db, member):
    with pytest.raises(Forbidden):
        await create_book(db, member, _book())


async def test_list_books_newest_period_first(db, admin):
    await create_book(db, admin, _book(title="Older", year=2024, month=11))
    await create_book(db, admin, _book(title="Newer", year=2025, month=2))
    await create_book(db, admin, _book(title="Essays", category=BookCategory.NON_FICTION, year=2025, month=1))

    assert [b.title for b in await list_books(db)] == ["Newer", "Essays", "Older"]
    assert [b.title for b in await list_books(db, category=BookCategory.NON_FICTION)] == ["Essays"]


async def test_update_book_is_partial(db, admin):
    book = await create_book(db, admin, _book())

    updated = await update_book(db, admin, book.id, BookUpdate(synopsis="A study of provincial life."))

    assert updated.synopsis == "A study of provincial life."
    assert updated.title == "Middlemarch"


async def test_update_book_trims_text(db, admin):
    book = await create_book(db, admin, _book(image_url="https://covers.example/mm.jpg"))

    updated = await update_book(db, admin, book.id, BookUpdate(title="  Adam Bede ", image_url="   "))

    assert updated.title == "Adam Bede"
    assert updated.image_url is None
    assert updated.author == book.author


@pytest.mark.parametrize("field", ["title", "author"])
async def test_update_book_rejects_blank_title_or_author(db, admin, field):
    book = await create_book(db, admin, _book())

    with pytest.raises(ValidationError):
        await update_book(db, admin, book.id, BookUpdate(**{field: "   "}))

    stored = await get_book(db, book.id)
    assert stored.title == "Middlemarch"
    assert stored.author == "George Eliot"


async def test_update_missing_book(db, admin):
    with pytest.raises(NotFound):
        await update_book(db, admin, uuid4(), BookUpdate(title="Anything"))


async def test_delete_book(db, admin):
    book = await create_book(db, admin, _book())

    await delete_book(db, admin, book.id)

    with pytest.raises(NotFound):
        await get_book(db, book.id)
