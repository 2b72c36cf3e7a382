"""create bookings, booked_dates, admin_users and gallery_items

Revision ID: 3f9a1c2d7e10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c2d7e10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GALLERY_SEED = [
    ("wedding", "Elegant Wedding Reception", "Beautiful ballroom setup for 300 guests"),
    ("corporate", "Corporate Gala", "Annual company celebration"),
    ("conference", "Tech Conference 2023", "500+ attendees, main auditorium"),
    ("wedding", "Garden Wedding", "Outdoor ceremony space"),
    ("social", "Charity Fundraiser", "Community event in main hall"),
    ("corporate", "Product Launch", "Modern setup with AV equipment"),
    ("conference", "Medical Symposium", "Professional conference setup"),
    ("social", "Birthday Celebration", "Private party in cocktail lounge"),
    ("wedding", "Intimate Wedding", "Small ceremony in chapel"),
]


def upgrade() -> None:
    # ---- bookings ----------------------------------------------------------
    op.create_table(
        "bookings",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column("event_type", sa.String(length=100), nullable=False),
        sa.Column("preferred_dates", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        sa.Column("venue_cost", sa.Integer(), nullable=True),
        sa.Column("additional_services", sa.Integer(), nullable=True),
        sa.Column("total_amount", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_bookings_email"), "bookings", ["email"], unique=False)
    op.create_index(op.f("ix_bookings_status"), "bookings", ["status"], unique=False)

    # ---- booked_dates ------------------------------------------------------
    op.create_table(
        "booked_dates",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("event_name", sa.String(length=300), nullable=True),
        sa.Column("booking_id", sa.String(length=36), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["booking_id"], ["bookings.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_booked_dates_date"), "booked_dates", ["date"], unique=True)
    op.create_index(
        op.f("ix_booked_dates_booking_id"), "booked_dates", ["booking_id"], unique=False
    )

    # ---- admin_users -------------------------------------------------------
    op.create_table(
        "admin_users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("username", sa.String(length=150), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_admin_users_username"), "admin_users", ["username"], unique=True
    )

    # ---- gallery_items -----------------------------------------------------
    gallery = op.create_table(
        "gallery_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False),
        sa.Column("category", sa.String(length=40), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_gallery_items_category"), "gallery_items", ["category"], unique=False
    )

    now = datetime.now(timezone.utc)
    op.bulk_insert(
        gallery,
        [
            {
                "title": title,
                "description": description,
                "category": category,
                "created_at": now,
                "updated_at": now,
            }
            for category, title, description in GALLERY_SEED
        ],
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_gallery_items_category"), table_name="gallery_items")
    op.drop_table("gallery_items")

    op.drop_index(op.f("ix_admin_users_username"), table_name="admin_users")
    op.drop_table("admin_users")

    op.drop_index(op.f("ix_booked_dates_booking_id"), table_name="booked_dates")
    op.drop_index(op.f("ix_booked_dates_date"), table_name="booked_dates")
    op.drop_table("booked_dates")

    op.drop_index(op.f("ix_bookings_status"), table_name="bookings")
    op.drop_index(op.f("ix_bookings_email"), table_name="bookings")
    op.drop_table("bookings")
