# Standard library imports
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

# Third-party imports
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db.store_errors import store_errors
from bookclub.core.monitoring.logging import get_contextual_logger
from bookclub.models.books.enums import BookCategory
from bookclub.models.books.portal_status import PortalStatus
from bookclub.services.access import Identity, Operation, authorize
from bookclub.services.exceptions import DuplicateKind, NotFound, ValidationError
from bookclub.utils.period_utils import Period, nomination_period, upcoming_periods


@dataclass(frozen=True)
class UpcomingPeriod:
    """One calendar month ahead, with the portal rows that already cover it."""

    month: int
    year: int
    fiction: Period
    non_fiction: Period
    fiction_portal: PortalStatus | None
    non_fiction_portal: PortalStatus | None


def _period_filter(period: Period) -> tuple:
    return (
        PortalStatus.category == period.category,
        PortalStatus.month == period.month,
        PortalStatus.year == period.year,
    )


async def find_portal_status(db: AsyncSession, period: Period) -> PortalStatus | None:
    """Return the portal row for the (normalized) period, or None."""
    period = period.normalize()
    query = select(PortalStatus).where(*_period_filter(period)).execution_options(populate_existing=True)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_portal_status(db: AsyncSession, period: Period) -> PortalStatus:
    async with store_errors(db, "load a portal status"):
        status = await find_portal_status(db, period)
    if status is None:
        raise NotFound(f"No portal status for {period.normalize().label}")
    return status


async def get_nominating_portal_status(db: AsyncSession, category: BookCategory, now: datetime) -> PortalStatus:
    """Portal for the period members are nominating for at `now`."""
    return await get_portal_status(db, nomination_period(category, now))


async def list_portal_statuses(db: AsyncSession, actor: Identity | None) -> Sequence[PortalStatus]:
    authorize(actor, Operation.PORTAL_LIST)
    async with store_errors(db, "list portal statuses"):
        result = await db.execute(
            select(PortalStatus).order_by(PortalStatus.year.asc(), PortalStatus.month.asc(), PortalStatus.category)
        )
        return result.scalars().all()


async def create_portal_status(
    db: AsyncSession,
    actor: Identity | None,
    period: Period,
    nomination_open: bool = False,
    voting_open: bool = False,
) -> PortalStatus:
    """
    Create the portal row for a period.

    Raises:
        ValidationError: If both windows are requested open.
        DuplicateKind: If the period already has a portal row.
    """
    actor = authorize(actor, Operation.PORTAL_CREATE)
    period = period.normalize()
    logger = get_contextual_logger(__name__, user_id=actor.user_id, period=period)

    if nomination_open and voting_open:
        raise ValidationError("Nomination and voting cannot both be open")

    async with store_errors(db, "create a portal status"):
        if await find_portal_status(db, period) is not None:
            raise DuplicateKind(f"A portal status already exists for {period.label}")

        status = PortalStatus(
            category=period.category,
            month=period.month,
            year=period.year,
            nomination_open=nomination_open,
            voting_open=voting_open,
        )
        db.add(status)
        try:
            await db.commit()
        except IntegrityError as e:
            # Lost a race with another administrator creating the same row
            await db.rollback()
            raise DuplicateKind(f"A portal status already exists for {period.label}") from e

    logger.info("Portal status created")
    return status


async def update_portal_status(
    db: AsyncSession,
    actor: Identity | None,
    portal_id: UUID,
    nomination_open: bool | None = None,
    voting_open: bool | None = None,
) -> PortalStatus:
    """
    Toggle the nomination and/or voting window of a portal.

    Opening one window closes the other within the same UPDATE statement,
    so the row never has both flags set. Closing a window leaves the other
    one untouched.
    """
    actor = authorize(actor, Operation.PORTAL_TOGGLE)
    logger = get_contextual_logger(__name__, user_id=actor.user_id, portal_id=portal_id)

    if nomination_open and voting_open:
        raise ValidationError("Nomination and voting cannot both be open")

    values: dict[str, bool] = {}
    if nomination_open is not None:
        values["nomination_open"] = nomination_open
        if nomination_open:
            values["voting_open"] = False
    if voting_open is not None:
        values["voting_open"] = voting_open
        if voting_open:
            values["nomination_open"] = False
    if not values:
        raise ValidationError("Provide nomination_open or voting_open")

    async with store_errors(db, "update a portal status"):
        result = await db.execute(
            update(PortalStatus)
            .where(PortalStatus.id == portal_id)
            .values(**values)
            .returning(PortalStatus)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        status = result.scalar_one_or_none()
        if status is None:
            raise NotFound("Portal status not found")
        await db.commit()

    logger.info(f"Portal status updated: {values}")
    return status


async def set_nomination_open(db: AsyncSession, actor: Identity | None, portal_id: UUID, is_open: bool) -> PortalStatus:
    return await update_portal_status(db, actor, portal_id, nomination_open=is_open)


async def set_voting_open(db: AsyncSession, actor: Identity | None, portal_id: UUID, is_open: bool) -> PortalStatus:
    return await update_portal_status(db, actor, portal_id, voting_open=is_open)


async def list_upcoming_periods(
    db: AsyncSession, actor: Identity | None, now: datetime, count: int = 6
) -> list[UpcomingPeriod]:
    """
    The months following `now` with the fiction and non-fiction periods
    they fall in, and the portal rows already created for those periods.
    Administrators use it to see which portals still need creating.
    """
    authorize(actor, Operation.PORTAL_CREATE)
    months = upcoming_periods(now, count)
    years = sorted({month.year for month in months})

    async with store_errors(db, "list upcoming periods"):
        result = await db.execute(select(PortalStatus).where(PortalStatus.year.in_(years)))
        portals = {(p.category, p.month, p.year): p for p in result.scalars().all()}

    upcoming = []
    for month in months:
        fiction = Period(category=BookCategory.FICTION, month=month.month, year=month.year)
        non_fiction = Period(category=BookCategory.NON_FICTION, month=month.month, year=month.year).normalize()
        upcoming.append(
            UpcomingPeriod(
                month=month.month,
                year=month.year,
                fiction=fiction,
                non_fiction=non_fiction,
                fiction_portal=portals.get((fiction.category, fiction.month, fiction.year)),
                non_fiction_portal=portals.get((non_fiction.category, non_fiction.month, non_fiction.year)),
            )
        )
    return upcoming
