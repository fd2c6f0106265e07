# Third-party imports
import pytest
from sqlalchemy import func, inspect, select

# Local application imports
from bookclub.core.db import store_errors
from bookclub.core.db.store_errors import has_pending_writes
from bookclub.models import Book, BookCategory
from bookclub.services.exceptions import NotFound, ValidationError


async def test_read_only_domain_error_keeps_loaded_objects(db, nomination_portal):
    with pytest.raises(NotFound):
        async with store_errors(db, "look something up"):
            await db.execute(select(Book))
            raise NotFound()

    assert not inspect(nomination_portal).expired_attributes
    assert nomination_portal.nomination_open is True


async def test_domain_error_after_write_rolls_back(db, session_factory):
    with pytest.raises(ValidationError):
        async with store_errors(db, "add a book"):
            db.add(Book(title="Draft", author="Nobody", category=BookCategory.FICTION, month=6, year=2025))
            await db.flush()
            assert has_pending_writes(db)
            raise ValidationError()

    assert not has_pending_writes(db)
    async with session_factory() as session:
        assert await session.scalar(select(func.count(Book.id))) == 0


async def test_commit_clears_write_flag(db):
    db.add(Book(title="Kept", author="Somebody", category=BookCategory.FICTION, month=6, year=2025))
    await db.flush()
    assert has_pending_writes(db)

    await db.commit()

    assert not has_pending_writes(db)
