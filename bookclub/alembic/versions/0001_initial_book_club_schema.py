"""initial book club schema

Revision ID: 0001_initial
Revises:
Create Date: 2025-06-01 09:00:00.000000

"""

# Third-party imports
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

book_category = sa.Enum("fiction", "non-fiction", name="book_category")


def _id_and_created_at() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "portal_status",
        *_id_and_created_at(),
        _updated_at(),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("category", book_category, nullable=False),
        sa.Column("nomination_open", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("voting_open", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_portal_status"),
        sa.UniqueConstraint("month", "year", "category", name="uq_portal_status_period"),
    )
    op.create_index("ix_portal_status_id", "portal_status", ["id"])
    op.create_index("ix_portal_status_year", "portal_status", ["year"])

    op.create_table(
        "suggestions",
        *_id_and_created_at(),
        sa.Column("user_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("author", sa.String(length=300), nullable=False),
        sa.Column("synopsis", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=True),
        sa.Column("category", book_category, nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("vote_count", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.CheckConstraint("vote_count >= 0", name="ck_suggestions_vote_count_non_negative"),
        sa.PrimaryKeyConstraint("id", name="pk_suggestions"),
    )
    op.create_index("ix_suggestions_id", "suggestions", ["id"])
    op.create_index("ix_suggestions_period", "suggestions", ["category", "year", "month"])
    op.create_index("ix_suggestions_owner_period", "suggestions", ["user_id", "category", "year", "month"])

    op.create_table(
        "votes",
        *_id_and_created_at(),
        sa.Column("user_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("suggestion_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["suggestion_id"],
            ["suggestions.id"],
            name="fk_votes_suggestion_id_suggestions",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_votes"),
        sa.UniqueConstraint("user_id", "suggestion_id", name="uq_votes_user_suggestion"),
    )
    op.create_index("ix_votes_id", "votes", ["id"])
    op.create_index("ix_votes_user_id", "votes", ["user_id"])
    op.create_index("ix_votes_suggestion_id", "votes", ["suggestion_id"])

    op.create_table(
        "books",
        *_id_and_created_at(),
        _updated_at(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("author", sa.String(length=300), nullable=False),
        sa.Column("synopsis", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=2048), nullable=True),
        sa.Column("category", book_category, nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("is_selected", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_books"),
    )
    op.create_index("ix_books_id", "books", ["id"])
    op.create_index("ix_books_month", "books", ["month"])
    op.create_index("ix_books_year", "books", ["year"])


def downgrade() -> None:
    op.drop_table("books")
    op.drop_table("votes")
    op.drop_table("suggestions")
    op.drop_table("portal_status")
    book_category.drop(op.get_bind(), checkfirst=True)
