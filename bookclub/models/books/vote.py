# Standard library imports
import uuid

# Third-party imports
from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from bookclub.models.base import Base
from bookclub.models.mixins.uuid_timestamp import UUIDCreatedMixin


class Vote(UUIDCreatedMixin, Base):
    __tablename__ = "votes"
    __table_args__ = (UniqueConstraint("user_id", "suggestion_id", name="uq_votes_user_suggestion"),)

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    suggestion_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("suggestions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
