# Standard library imports
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

# Third-party imports
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import ORMExecuteState, Session, SessionTransaction

# Local application imports
from bookclub.core.monitoring.logging import get_logger
from bookclub.services.exceptions import BookClubError, StoreUnavailable

logger = get_logger(__name__)

# Session.info flag: the current transaction has flushed or executed DML
WRITES_KEY = "bookclub.has_writes"


@event.listens_for(Session, "after_flush")
def _mark_flush(session: Session, flush_context) -> None:  # noqa: ARG001
    session.info[WRITES_KEY] = True


@event.listens_for(Session, "do_orm_execute")
def _mark_dml(orm_execute_state: ORMExecuteState) -> None:
    if orm_execute_state.is_insert or orm_execute_state.is_update or orm_execute_state.is_delete:
        orm_execute_state.session.info[WRITES_KEY] = True


@event.listens_for(Session, "after_transaction_end")
def _clear_writes(session: Session, transaction: SessionTransaction) -> None:
    if transaction.parent is None:
        session.info.pop(WRITES_KEY, None)


def has_pending_writes(db: AsyncSession) -> bool:
    """True if the session's open transaction has written anything."""
    return bool(db.info.get(WRITES_KEY)) or bool(db.new or db.dirty or db.deleted)


@asynccontextmanager
async def store_errors(db: AsyncSession, action: str) -> AsyncIterator[None]:
    """
    Run a unit of work against the store.

    A domain error raised before anything was written leaves the session
    untouched, so objects the caller already loaded stay usable. A domain
    error raised after a flush or DML statement rolls the transaction back
    before it propagates. Any other SQLAlchemy failure is rolled back,
    logged and surfaced as StoreUnavailable so raw driver exceptions never
    reach the caller.

    Args:
        db: The session the unit of work runs on.
        action: Short description used in the log line.
    """
    try:
        yield
    except BookClubError:
        if has_pending_writes(db):
            await db.rollback()
        raise
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(f"Store failure while trying to {action}")
        raise StoreUnavailable() from e
