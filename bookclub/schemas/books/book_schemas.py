# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from bookclub.models.books.enums import BookCategory


class BookCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    author: str = Field(..., min_length=1, max_length=300)
    synopsis: str | None = None
    image_url: str | None = None
    category: BookCategory
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)
    is_selected: bool = True


class BookUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    author: str | None = Field(None, min_length=1, max_length=300)
    synopsis: str | None = None
    image_url: str | None = None
    category: BookCategory | None = None
    month: int | None = Field(None, ge=1, le=12)
    year: int | None = Field(None, ge=2000, le=2100)
    is_selected: bool | None = None


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    synopsis: str | None
    image_url: str | None
    category: BookCategory
    month: int
    year: int
    is_selected: bool
    created_at: datetime
    updated_at: datetime
