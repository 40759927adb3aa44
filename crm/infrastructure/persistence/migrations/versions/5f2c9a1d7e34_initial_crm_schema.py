"""initial_crm_schema

Revision ID: 5f2c9a1d7e34
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "5f2c9a1d7e34"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INTERACTION_TYPES = (
    "CALL",
    "MEETING",
    "EMAIL",
    "TEXT",
    "COFFEE",
    "LUNCH",
    "EVENT",
    "OTHER",
)


def _timestamps(with_updated: bool = True) -> list[sa.Column]:
    cols = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        )
    ]
    if with_updated:
        cols.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            )
        )
    return cols


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "contact",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("social_media", sa.JSON(), nullable=True),
        sa.Column("company", sa.String(length=255), nullable=True),
        sa.Column("job_title", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("birthday", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_contact_email"), "contact", ["email"], unique=True)
    op.create_index("ix_contact_last_first", "contact", ["last_name", "first_name"])

    op.create_table(
        "tag",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column(
            "color", sa.String(length=7), server_default="#6B7280", nullable=True
        ),
        *_timestamps(with_updated=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "contact_tag",
        sa.Column("contact_id", sa.String(), nullable=False),
        sa.Column("tag_id", sa.String(), nullable=False),
        sa.Column(
            "assigned_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["contact_id"], ["contact.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tag.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("contact_id", "tag_id"),
    )
    op.create_index(op.f("ix_contact_tag_contact_id"), "contact_tag", ["contact_id"])
    op.create_index(op.f("ix_contact_tag_tag_id"), "contact_tag", ["tag_id"])

    op.create_table(
        "interaction",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("contact_id", sa.String(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(*INTERACTION_TYPES, name="interaction_type"),
            nullable=False,
        ),
        sa.Column("subject", sa.String(length=500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "date",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("location", sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["contact_id"], ["contact.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_interaction_contact_id"), "interaction", ["contact_id"])
    op.create_index(op.f("ix_interaction_date"), "interaction", ["date"])

    op.create_table(
        "note",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("contact_id", sa.String(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "is_pinned", sa.Boolean(), server_default="false", nullable=False
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["contact_id"], ["contact.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_note_contact_id"), "note", ["contact_id"])

    op.create_table(
        "reminder",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("contact_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "is_completed", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["contact_id"], ["contact.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_reminder_contact_id"), "reminder", ["contact_id"])
    op.create_index(op.f("ix_reminder_due_date"), "reminder", ["due_date"])
    op.create_index(op.f("ix_reminder_is_completed"), "reminder", ["is_completed"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_reminder_is_completed"), table_name="reminder")
    op.drop_index(op.f("ix_reminder_due_date"), table_name="reminder")
    op.drop_index(op.f("ix_reminder_contact_id"), table_name="reminder")
    op.drop_table("reminder")
    op.drop_index(op.f("ix_note_contact_id"), table_name="note")
    op.drop_table("note")
    op.drop_index(op.f("ix_interaction_date"), table_name="interaction")
    op.drop_index(op.f("ix_interaction_contact_id"), table_name="interaction")
    op.drop_table("interaction")
    postgresql.ENUM(name="interaction_type").drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f("ix_contact_tag_tag_id"), table_name="contact_tag")
    op.drop_index(op.f("ix_contact_tag_contact_id"), table_name="contact_tag")
    op.drop_table("contact_tag")
    op.drop_table("tag")
    op.drop_index("ix_contact_last_first", table_name="contact")
    op.drop_index(op.f("ix_contact_email"), table_name="contact")
    op.drop_table("contact")
