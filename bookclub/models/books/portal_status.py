# Third-party imports
from sqlalchemy import Boolean, Integer, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from bookclub.models.base import Base
from bookclub.models.books.enums import BookCategory, book_category_type
from bookclub.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class PortalStatus(UUIDTimeStampMixin, Base):
    __tablename__ = "portal_status"
    __table_args__ = (UniqueConstraint("month", "year", "category", name="uq_portal_status_period"),)

    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    category: Mapped[BookCategory] = mapped_column(
        book_category_type,
        nullable=False,
    )

    # At most one of these is true; the portal services enforce it
    nomination_open: Mapped[bool] = mapped_column(Boolean, default=False, server_default=text("false"), nullable=False)
    voting_open: Mapped[bool] = mapped_column(Boolean, default=False, server_default=text("false"), nullable=False)

    def __str__(self) -> str:
        return f"PortalStatus: {self.category.value} {self.year}-{self.month:02d}"
