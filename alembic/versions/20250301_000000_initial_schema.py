"""Initial schema for the scouts service

Revision ID: 20250301_000000
Revises: None
Create Date: 2025-03-01 00:00:00.000000

Creates all tables of the scouts service:
- groups
- scouts with their ordered contacts (scout_contacts) and group memberships (scout_groups)
- events with their participating groups (event_groups)
- registrations of scouts for events

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20250301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "groups",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "scouts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("address", sa.String(512), nullable=False),
        sa.Column("phone_number", sa.String(64), nullable=False),
        sa.Column("health_insurance", sa.String(255), nullable=False),
        sa.Column("allergy_info", sa.Text(), nullable=False),
        sa.Column("vaccination_info", sa.Text(), nullable=False),
        sa.Column("last_updated", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_scouts_name", "name"),
    )

    op.create_table(
        "scout_contacts",
        sa.Column("scout_id", sa.Integer(), nullable=False),
        sa.Column("contact_order", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("relationship", sa.String(128), nullable=False),
        sa.ForeignKeyConstraint(["scout_id"], ["scouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("scout_id", "contact_order"),
    )

    op.create_table(
        "scout_groups",
        sa.Column("scout_id", sa.Integer(), nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["scout_id"], ["scouts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("scout_id", "group_id"),
    )

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("meeting_point", sa.String(512), nullable=False),
        sa.Column("location", sa.String(512), nullable=False),
        sa.Column("cost", sa.String(255), nullable=False),
        sa.Column("additional_info", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "event_groups",
        sa.Column("event_id", sa.Integer(), nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("event_id", "group_id"),
    )

    op.create_table(
        "registrations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("scout_id", sa.Integer(), nullable=False),
        sa.Column("event_id", sa.Integer(), nullable=False),
        sa.Column("note", sa.Text(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("registration_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("account_id", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["scout_id"], ["scouts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_id", "scout_id", name="uq_registrations_event_scout"),
        sa.Index("ix_registrations_scout_id", "scout_id"),
        sa.Index("ix_registrations_event_id", "event_id"),
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("registrations")
    op.drop_table("event_groups")
    op.drop_table("events")
    op.drop_table("scout_groups")
    op.drop_table("scout_contacts")
    op.drop_table("scouts")
    op.drop_table("groups")
