# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from bookclub.core.db import get_async_session
from bookclub.dependancies.common import get_current_identity
from bookclub.models.books.enums import BookCategory
from bookclub.schemas.books.book_schemas import BookResponse
from bookclub.schemas.books.suggestion_schemas import SuggestionCreate, SuggestionResponse
from bookclub.schemas.books.vote_schemas import UserVotesResponse, VoteResponse, VoteResultResponse
from bookclub.schemas.common import SuccessResponse
from bookclub.services.access import Identity
from bookclub.services.books import selection_services, suggestion_services, vote_services
from bookclub.utils.period_utils import Period

router = APIRouter(prefix="/suggestions", tags=["Suggestions"])


@router.get("", response_model=list[SuggestionResponse])
async def list_suggestions(
    category: BookCategory,
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., ge=2000, le=2100),
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Leaderboard for a period: most votes first, earliest submission wins ties"""
    suggestions = await suggestion_services.list_suggestions(
        db, current_identity, Period(category=category, month=month, year=year)
    )
    return [SuggestionResponse.model_validate(suggestion) for suggestion in suggestions]


@router.get("/all", response_model=list[SuggestionResponse])
async def list_all_suggestions(
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """All suggestions across periods (admin only)"""
    suggestions = await suggestion_services.list_all_suggestions(db, current_identity)
    return [SuggestionResponse.model_validate(suggestion) for suggestion in suggestions]


@router.get("/votes/me", response_model=UserVotesResponse)
async def list_my_votes(
    category: BookCategory,
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., ge=2000, le=2100),
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Suggestions the caller already voted for in a period"""
    suggestion_ids = await vote_services.list_user_votes(
        db, current_identity, Period(category=category, month=month, year=year)
    )
    return UserVotesResponse(suggestion_ids=suggestion_ids)


@router.post("", response_model=SuggestionResponse)
async def submit_suggestion(
    suggestion_data: SuggestionCreate,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Suggest a book while nominations are open (max 3 per period)"""
    suggestion = await suggestion_services.submit_suggestion(db, current_identity, suggestion_data)
    return SuggestionResponse.model_validate(suggestion)


@router.post("/{suggestion_id}/votes", response_model=VoteResultResponse)
async def cast_vote(
    suggestion_id: UUID,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Vote for a suggestion while voting is open"""
    result = await vote_services.cast_vote(db, current_identity, suggestion_id)
    return VoteResultResponse(
        vote=VoteResponse.model_validate(result.vote),
        suggestion_id=suggestion_id,
        vote_count=result.vote_count,
    )


@router.post("/{suggestion_id}/select", response_model=BookResponse)
async def select_winner(
    suggestion_id: UUID,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Promote a suggestion to the book catalog and close its portal (admin only)"""
    book = await selection_services.select_winner(db, current_identity, suggestion_id)
    return BookResponse.model_validate(book)


@router.delete("/{suggestion_id}", response_model=SuccessResponse)
async def delete_suggestion(
    suggestion_id: UUID,
    current_identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_async_session),
):
    """Delete a suggestion and its votes (admin only)"""
    await suggestion_services.delete_suggestion(db, current_identity, suggestion_id)
    return SuccessResponse()
