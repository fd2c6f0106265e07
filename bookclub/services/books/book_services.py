# Standard library imports
from collections.abc import Sequence
from uuid import UUID

# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db.store_errors import store_errors
from bookclub.core.monitoring.logging import get_contextual_logger
from bookclub.models.books.book import Book
from bookclub.models.books.enums import BookCategory
from bookclub.schemas.books.book_schemas import BookCreate, BookUpdate
from bookclub.services.access import Identity, Operation, authorize
from bookclub.services.exceptions import NotFound, ValidationError
from bookclub.utils.model_utils import update_model_fields


def _clean_text_fields(data: dict) -> dict:
    """Trim the text fields present in `data`; blank optional ones become None."""
    for field in ("title", "author"):
        if field in data:
            data[field] = (data[field] or "").strip()
            if not data[field]:
                raise ValidationError("Title and author are required")
    for field in ("synopsis", "image_url"):
        if field in data:
            data[field] = (data[field] or "").strip() or None
    return data


async def list_books(db: AsyncSession, category: BookCategory | None = None) -> Sequence[Book]:
    """The catalog, most recent period first."""
    query = select(Book)
    if category is not None:
        query = query.where(Book.category == category)
    query = query.order_by(Book.year.desc(), Book.month.desc(), Book.created_at.desc())

    async with store_errors(db, "list books"):
        result = await db.execute(query)
        return result.scalars().all()


async def get_book(db: AsyncSession, book_id: UUID) -> Book:
    async with store_errors(db, "load a book"):
        book = await db.get(Book, book_id)
    if book is None:
        raise NotFound("Book not found")
    return book


async def create_book(db: AsyncSession, actor: Identity | None, book_data: BookCreate) -> Book:
    actor = authorize(actor, Operation.BOOK_CREATE)
    logger = get_contextual_logger(__name__, user_id=actor.user_id)

    data = _clean_text_fields(book_data.model_dump())

    async with store_errors(db, "create a book"):
        book = Book(**data)
        db.add(book)
        await db.commit()

    logger.info(f"Book created: {book.title}")
    return book


async def update_book(db: AsyncSession, actor: Identity | None, book_id: UUID, update_data: BookUpdate) -> Book:
    actor = authorize(actor, Operation.BOOK_UPDATE)
    logger = get_contextual_logger(__name__, user_id=actor.user_id, book_id=book_id)
    changes = _clean_text_fields(update_data.model_dump(exclude_unset=True))

    async with store_errors(db, "update a book"):
        book = await db.get(Book, book_id)
        if book is None:
            raise NotFound("Book not found")

        changed = update_model_fields(book, update_data.model_copy(update=changes))
        # A blank synopsis or image URL clears it
        for field in ("synopsis", "image_url"):
            if field in changes and changes[field] is None:
                setattr(book, field, None)
                changed.append(field)
        await db.commit()
        await db.refresh(book)

    logger.info(f"Book updated: {', '.join(changed) or 'no changes'}")
    return book


async def delete_book(db: AsyncSession, actor: Identity | None, book_id: UUID) -> None:
    actor = authorize(actor, Operation.BOOK_DELETE)
    logger = get_contextual_logger(__name__, user_id=actor.user_id, book_id=book_id)

    async with store_errors(db, "delete a book"):
        book = await db.get(Book, book_id)
        if book is None:
            raise NotFound("Book not found")
        await db.delete(book)
        await db.commit()

    logger.info("Book deleted")
