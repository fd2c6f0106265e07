# Standard library imports
from datetime import UTC, datetime
import uuid

# Third-party imports
from sqlalchemy import TIMESTAMP, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class UUIDCreatedMixin:
    """A reusable mixin that:
    - Provides a UUID primary key named 'id'
    - Records created_at with microsecond precision

    created_at is set client side as well as by the server default, so rows
    inserted within the same second still order by insertion time on
    backends whose CURRENT_TIMESTAMP is second-granular (SQLite).
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class UUIDTimeStampMixin(UUIDCreatedMixin):
    """UUIDCreatedMixin plus an updated_at column refreshed on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
    )
