"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-16

Creates the users table and the append-only weather_readings table with
its (city, timestamp) index.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    # --- weather_readings ---
    op.create_table(
        "weather_readings",
        sa.Column("reading_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("temperature", sa.Float, nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("humidity", sa.Float, nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_weather_readings_city_timestamp", "weather_readings", ["city", "timestamp"])


def downgrade() -> None:
    op.drop_index("ix_weather_readings_city_timestamp", table_name="weather_readings")
    op.drop_table("weather_readings")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
