# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db import get_async_session
from bookclub.dependancies.common import get_current_identity
from bookclub.models.books.enums import BookCategory
from bookclub.schemas.books.book_schemas import BookCreate, BookResponse, BookUpdate
from bookclub.schemas.common import SuccessResponse
from bookclub.services.access import Identity
from bookclub.services.books import book_services

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=list[BookResponse])
async def list_books(
    category: BookCategory | None = None,
    db: AsyncSession = Depends(get_async_session),
):
    """List the book catalog, most recent period first"""
    books = await book_services.list_books(db, category=category)
    return [BookResponse.model_validate(book) for book in books]


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Get book details"""
    book = await book_services.get_book(db, book_id)
    return BookResponse.model_validate(book)


@router.post("", response_model=BookResponse)
async def create_book(
    book_data: BookCreate,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Add a book to the catalog (admin only)"""
    book = await book_services.create_book(db, current_identity, book_data)
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: UUID,
    update_data: BookUpdate,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Edit a book (admin only)"""
    book = await book_services.update_book(db, current_identity, book_id, update_data)
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", response_model=SuccessResponse)
async def delete_book(
    book_id: UUID,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Remove a book from the catalog (admin only)"""
    await book_services.delete_book(db, current_identity, book_id)
    return SuccessResponse()
