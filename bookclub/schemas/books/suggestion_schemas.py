# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from bookclub.models.books.enums import BookCategory


class SuggestionCreate(BaseModel):
    # Content rules (non-empty fields, synopsis length) are checked by the
    # suggestion services after the portal and quota checks.
    title: str
    author: str
    synopsis: str
    image_url: str | None = None
    category: BookCategory
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)


class SuggestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    author: str
    synopsis: str
    image_url: str | None
    category: BookCategory
    month: int
    year: int
    vote_count: int
    created_at: datetime
