"""create_library_tables

Revision ID: 3c8e1f2a9b7d
Revises:
Create Date: 2026-10-18 10:12:31.402118

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c8e1f2a9b7d"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "saved_books",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("volume_id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), nullable=True),
        sa.Column("publisher", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("has_read", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "volume_id", name="uq_saved_books_user_volume"),
    )
    op.create_index(op.f("ix_saved_books_user_id"), "saved_books", ["user_id"], unique=False)

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("volume_id", sa.String(length=64), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id", "volume_id"],
            ["saved_books.user_id", "saved_books.volume_id"],
            name="fk_reviews_saved_book",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "volume_id", name="uq_reviews_user_volume"),
    )
    op.create_index(op.f("ix_reviews_volume_id"), "reviews", ["volume_id"], unique=False)

    op.create_table(
        "ratings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("volume_id", sa.String(length=64), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_ratings_rating_1_5"),
        sa.ForeignKeyConstraint(
            ["user_id", "volume_id"],
            ["saved_books.user_id", "saved_books.volume_id"],
            name="fk_ratings_saved_book",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "volume_id", name="uq_ratings_user_volume"),
    )
    op.create_index(op.f("ix_ratings_volume_id"), "ratings", ["volume_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_ratings_volume_id"), table_name="ratings")
    op.drop_table("ratings")
    op.drop_index(op.f("ix_reviews_volume_id"), table_name="reviews")
    op.drop_table("reviews")
    op.drop_index(op.f("ix_saved_books_user_id"), table_name="saved_books")
    op.drop_table("saved_books")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
