"""Initial schema

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7b9d10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")

READING_STATUS_VALUES = ("WANT_TO_READ", "READING", "FINISHED")
TRANSACTION_TYPE_VALUES = ("INCOME", "EXPENSE")

# Tables carrying a user_id column, in creation order
USER_OWNED_TABLES = (
    "habits",
    "habit_completions",
    "journal_entries",
    "pomodoro_sessions",
    "meditation_sessions",
    "favorite_sounds",
    "books",
    "transactions",
    "goals",
    "milestones",
    "skills",
    "energy_logs",
    "todos",
    "notes",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _owned(name: str, *columns: sa.Column, **kw) -> None:
    """Create a table with id, user_id and timestamps around ``columns``."""
    op.create_table(
        name,
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *columns,
        *_timestamps(),
        **kw,
    )
    op.create_index(f"ix_{name}_user_id", name, ["user_id"])


def upgrade() -> None:
    """Upgrade database schema."""

    # ------------------------------------------------------------------
    # Users and preferences
    # ------------------------------------------------------------------
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "user_preferences",
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("notification_preferences", JSON_TYPE, nullable=True),
        sa.Column("appearance_preferences", JSON_TYPE, nullable=True),
        sa.Column("pomodoro_settings", JSON_TYPE, nullable=True),
        *_timestamps(),
    )

    # ------------------------------------------------------------------
    # Relaxation catalogue (not user scoped)
    # ------------------------------------------------------------------
    op.create_table(
        "relaxation_sounds",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("src", sa.String(500), nullable=False),
        sa.Column("cover_image", sa.String(500), nullable=True),
        *_timestamps(),
    )

    # ------------------------------------------------------------------
    # Habits
    # ------------------------------------------------------------------
    _owned(
        "habits",
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("frequency", sa.String(50), nullable=False),
        sa.Column("color", sa.String(30), nullable=True),
    )
    _owned(
        "habit_completions",
        sa.Column(
            "habit_id",
            sa.Uuid(),
            sa.ForeignKey("habits.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("idx_habit_completion_habit_date", "habit_completions", ["habit_id", "date"])
    op.create_index("idx_habit_completion_user_date", "habit_completions", ["user_id", "date"])

    # ------------------------------------------------------------------
    # Journal, focus sessions, favourites, books
    # ------------------------------------------------------------------
    _owned(
        "journal_entries",
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("mood", sa.String(50), nullable=True),
        sa.Column("tags", JSON_TYPE, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
    )
    op.create_index("idx_journal_user_date", "journal_entries", ["user_id", "date"])

    _owned(
        "pomodoro_sessions",
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("task", sa.String(200), nullable=True),
    )
    op.create_index("idx_pomodoro_user_date", "pomodoro_sessions", ["user_id", "date"])

    _owned(
        "meditation_sessions",
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("idx_meditation_user_date", "meditation_sessions", ["user_id", "date"])

    _owned(
        "favorite_sounds",
        sa.Column(
            "sound_id",
            sa.Uuid(),
            sa.ForeignKey("relaxation_sounds.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )

    _owned(
        "books",
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("author", sa.String(200), nullable=True),
        sa.Column("genre", sa.String(100), nullable=True),
        sa.Column("status", sa.Enum(*READING_STATUS_VALUES, name="readingstatus"), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("total_pages", sa.Integer(), nullable=True),
        sa.Column("current_page", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("cover_image", sa.String(500), nullable=True),
    )

    # ------------------------------------------------------------------
    # Finance, goals, tracking
    # ------------------------------------------------------------------
    _owned(
        "transactions",
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("type", sa.Enum(*TRANSACTION_TYPE_VALUES, name="transactiontype"), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
    )
    op.create_index("idx_transaction_user_date", "transactions", ["user_id", "date"])

    _owned(
        "goals",
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("progress", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("target_date", sa.Date(), nullable=True),
    )
    _owned(
        "milestones",
        sa.Column(
            "goal_id",
            sa.Uuid(),
            sa.ForeignKey("goals.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
    )
    _owned(
        "skills",
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("level", sa.String(50), nullable=True),
        sa.Column("hours_spent", sa.Float(), nullable=False),
    )

    _owned(
        "energy_logs",
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("energy_level", sa.Integer(), nullable=False),
        sa.Column("focus_level", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("idx_energy_user_date", "energy_logs", ["user_id", "date"])

    _owned(
        "todos",
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
    )
    _owned(
        "notes",
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    for name in reversed(USER_OWNED_TABLES):
        op.drop_table(name)

    op.drop_table("relaxation_sounds")
    op.drop_table("user_preferences")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

    sa.Enum(name="transactiontype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="readingstatus").drop(op.get_bind(), checkfirst=True)
