"""Create marketplace tables

Revision ID: 3c1e9b7d2a40
Revises:
Create Date: 2026-10-17 10:12:31.402117

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1e9b7d2a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CAR_STATUS = sa.Enum("AVAILABLE", "UNAVAILABLE", "SOLD", name="car_status")
USER_ROLE = sa.Enum("USER", "ADMIN", name="user_role")
TEST_DRIVE_STATUS = sa.Enum(
    "PENDING", "CONFIRMED", "COMPLETED", "CANCELLED", "NO_SHOW", name="test_drive_status"
)
DAY_OF_WEEK = sa.Enum(
    "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY",
    name="day_of_week",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "cars",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("make", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=50), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(length=30), nullable=True),
        sa.Column("fuel_type", sa.String(length=20), nullable=True),
        sa.Column("transmission", sa.String(length=20), nullable=True),
        sa.Column("body_type", sa.String(length=30), nullable=True),
        sa.Column("seats", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", CAR_STATUS, nullable=False),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cars_make"), "cars", ["make"])
    op.create_index(op.f("ix_cars_fuel_type"), "cars", ["fuel_type"])
    op.create_index(op.f("ix_cars_body_type"), "cars", ["body_type"])
    op.create_index(op.f("ix_cars_status"), "cars", ["status"])

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("external_auth_id", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        sa.Column("phone", sa.String(length=30), nullable=True),
        sa.Column("role", USER_ROLE, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_auth_id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "test_drive_bookings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("car_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("booking_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.Column("status", TEST_DRIVE_STATUS, nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_test_drive_bookings_car_id"), "test_drive_bookings", ["car_id"])
    op.create_index(op.f("ix_test_drive_bookings_user_id"), "test_drive_bookings", ["user_id"])
    op.create_index(op.f("ix_test_drive_bookings_booking_date"), "test_drive_bookings", ["booking_date"])
    op.create_index(op.f("ix_test_drive_bookings_status"), "test_drive_bookings", ["status"])

    op.create_table(
        "saved_cars",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("car_id", sa.Uuid(), nullable=False),
        sa.Column("saved_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "car_id"),
    )

    op.create_table(
        "dealership_info",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=512), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "working_hours",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("dealership_id", sa.Uuid(), nullable=False),
        sa.Column("day_of_week", DAY_OF_WEEK, nullable=False),
        sa.Column("open_time", sa.String(length=5), nullable=False),
        sa.Column("close_time", sa.String(length=5), nullable=False),
        sa.Column("is_open", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["dealership_id"], ["dealership_info.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("dealership_id", "day_of_week"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("working_hours")
    op.drop_table("dealership_info")
    op.drop_table("saved_cars")
    op.drop_index(op.f("ix_test_drive_bookings_status"), table_name="test_drive_bookings")
    op.drop_index(op.f("ix_test_drive_bookings_booking_date"), table_name="test_drive_bookings")
    op.drop_index(op.f("ix_test_drive_bookings_user_id"), table_name="test_drive_bookings")
    op.drop_index(op.f("ix_test_drive_bookings_car_id"), table_name="test_drive_bookings")
    op.drop_table("test_drive_bookings")
    op.drop_table("users")
    op.drop_index(op.f("ix_cars_status"), table_name="cars")
    op.drop_index(op.f("ix_cars_body_type"), table_name="cars")
    op.drop_index(op.f("ix_cars_fuel_type"), table_name="cars")
    op.drop_index(op.f("ix_cars_make"), table_name="cars")
    op.drop_table("cars")

    bind = op.get_bind()
    for enum_type in (DAY_OF_WEEK, TEST_DRIVE_STATUS, USER_ROLE, CAR_STATUS):
        enum_type.drop(bind, checkfirst=True)
