# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Local application imports
from bookclub.models.books.enums import BookCategory


class PortalStatusCreate(BaseModel):
    category: BookCategory
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)
    nomination_open: bool = False
    voting_open: bool = False

    @model_validator(mode="after")
    def check_single_open_window(self) -> "PortalStatusCreate":
        if self.nomination_open and self.voting_open:
            raise ValueError("Nomination and voting cannot both be open")
        return self


class PortalStatusUpdate(BaseModel):
    nomination_open: bool | None = None
    voting_open: bool | None = None

    @model_validator(mode="after")
    def check_single_open_window(self) -> "PortalStatusUpdate":
        if self.nomination_open and self.voting_open:
            raise ValueError("Nomination and voting cannot both be open")
        if self.nomination_open is None and self.voting_open is None:
            raise ValueError("Provide nomination_open or voting_open")
        return self


class PortalStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category: BookCategory
    month: int
    year: int
    nomination_open: bool
    voting_open: bool
    created_at: datetime
    updated_at: datetime


class UpcomingPeriodResponse(BaseModel):
    month: int
    year: int
    label: str
    non_fiction_month: int
    non_fiction_label: str
    fiction_portal: PortalStatusResponse | None = None
    non_fiction_portal: PortalStatusResponse | None = None
