# Standard library imports
from datetime import UTC, datetime
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db import get_async_session
from bookclub.dependancies.common import get_current_identity
from bookclub.models.books.enums import BookCategory
from bookclub.models.books.portal_status import PortalStatus
from bookclub.schemas.books.portal_schemas import (
    PortalStatusCreate,
    PortalStatusResponse,
    PortalStatusUpdate,
    UpcomingPeriodResponse,
)
from bookclub.services.access import Identity
from bookclub.services.books import portal_services
from bookclub.utils.period_utils import Period, month_name

router = APIRouter(prefix="/portal", tags=["Portal"])


def _portal_response(status: PortalStatus | None) -> PortalStatusResponse | None:
    return PortalStatusResponse.model_validate(status) if status is not None else None


@router.get("", response_model=list[PortalStatusResponse])
async def list_portal_statuses(
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """List every portal status, oldest period first"""
    statuses = await portal_services.list_portal_statuses(db, current_identity)
    return [PortalStatusResponse.model_validate(status) for status in statuses]


@router.get("/status", response_model=PortalStatusResponse)
async def get_portal_status(
    category: BookCategory,
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., ge=2000, le=2100),
    db: AsyncSession = Depends(get_async_session),
):
    """Get the nomination/voting state of one period"""
    status = await portal_services.get_portal_status(db, Period(category=category, month=month, year=year))
    return PortalStatusResponse.model_validate(status)


@router.get("/current", response_model=PortalStatusResponse)
async def get_nominating_portal_status(
    category: BookCategory,
    db: AsyncSession = Depends(get_async_session),
):
    """Get the portal of the period members are nominating for now"""
    status = await portal_services.get_nominating_portal_status(db, category, datetime.now(UTC))
    return PortalStatusResponse.model_validate(status)


@router.get("/upcoming", response_model=list[UpcomingPeriodResponse])
async def list_upcoming_periods(
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """List the next six months and the portals already created for them (admin only)"""
    upcoming = await portal_services.list_upcoming_periods(db, current_identity, datetime.now(UTC))
    return [
        UpcomingPeriodResponse(
            month=entry.month,
            year=entry.year,
            label=f"{month_name(entry.month)} {entry.year}",
            non_fiction_month=entry.non_fiction.month,
            non_fiction_label=entry.non_fiction.label,
            fiction_portal=_portal_response(entry.fiction_portal),
            non_fiction_portal=_portal_response(entry.non_fiction_portal),
        )
        for entry in upcoming
    ]


@router.post("", response_model=PortalStatusResponse)
async def create_portal_status(
    portal_data: PortalStatusCreate,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Create the portal for a period (admin only)"""
    status = await portal_services.create_portal_status(
        db,
        current_identity,
        Period(category=portal_data.category, month=portal_data.month, year=portal_data.year),
        nomination_open=portal_data.nomination_open,
        voting_open=portal_data.voting_open,
    )
    return PortalStatusResponse.model_validate(status)


@router.put("/{portal_id}", response_model=PortalStatusResponse)
async def update_portal_status(
    portal_id: UUID,
    update_data: PortalStatusUpdate,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Open or close nominations/voting; opening one closes the other (admin only)"""
    status = await portal_services.update_portal_status(
        db,
        current_identity,
        portal_id,
        nomination_open=update_data.nomination_open,
        voting_open=update_data.voting_open,
    )
    return PortalStatusResponse.model_validate(status)
