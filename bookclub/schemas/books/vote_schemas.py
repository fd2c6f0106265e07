# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict


class VoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    suggestion_id: UUID
    created_at: datetime


class VoteResultResponse(BaseModel):
    vote: VoteResponse
    suggestion_id: UUID
    vote_count: int


class UserVotesResponse(BaseModel):
    suggestion_ids: list[UUID]
