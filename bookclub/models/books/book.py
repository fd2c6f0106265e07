# Third-party imports
from sqlalchemy import Boolean, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from bookclub.models.base import Base
from bookclub.models.books.enums import BookCategory, book_category_type
from bookclub.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class Book(UUIDTimeStampMixin, Base):
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[str] = mapped_column(String(300), nullable=False)
    synopsis: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    category: Mapped[BookCategory] = mapped_column(
        book_category_type,
        nullable=False,
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    is_selected: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"), nullable=False)

    def __str__(self) -> str:
        return f"Book: {self.title} by {self.author}"
