# Standard library imports
import uuid

# Third-party imports
from sqlalchemy import CheckConstraint, Index, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from bookclub.models.base import Base
from bookclub.models.books.enums import BookCategory, book_category_type
from bookclub.models.mixins.uuid_timestamp import UUIDCreatedMixin


class Suggestion(UUIDCreatedMixin, Base):
    __tablename__ = "suggestions"
    __table_args__ = (
        CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
        Index("ix_suggestions_period", "category", "year", "month"),
        Index("ix_suggestions_owner_period", "user_id", "category", "year", "month"),
    )

    # Owner, as reported by the identity provider
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[str] = mapped_column(String(300), nullable=False)
    synopsis: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    category: Mapped[BookCategory] = mapped_column(
        book_category_type,
        nullable=False,
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    # Only ever changed by an atomic UPDATE in the vote services
    vote_count: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"), nullable=False)

    def __str__(self) -> str:
        return f"Suggestion: {self.title} by {self.author} ({self.vote_count} votes)"
