"""Initial sync schema.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def _branch_fk() -> sa.Column:
    return sa.Column(
        "branch_id", sa.Uuid(), sa.ForeignKey("branch.id", ondelete="CASCADE"), nullable=False
    )


def upgrade() -> None:
    # Branch (tenant root)
    op.create_table(
        "branch",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("platform_company_id", sa.String(100)),
        *_timestamps(),
    )

    # Per-branch platform credentials
    op.create_table(
        "integration_settings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _branch_fk(),
        sa.Column("partner_token", sa.Text()),
        sa.Column("user_token", sa.Text()),
        *_timestamps(),
        sa.UniqueConstraint("branch_id", name="uq_integration_settings_branch_id"),
    )
    op.create_index("ix_integration_settings_branch_id", "integration_settings", ["branch_id"])

    # Staff
    op.create_table(
        "staff",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _branch_fk(),
        sa.Column("platform_staff_id", sa.String(100), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_synced_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.UniqueConstraint("branch_id", "platform_staff_id", name="uq_staff_branch_platform_id"),
    )
    op.create_index("ix_staff_branch_id", "staff", ["branch_id"])
    op.create_index("ix_staff_platform_staff_id", "staff", ["platform_staff_id"])

    # Service
    op.create_table(
        "service",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _branch_fk(),
        sa.Column("platform_service_id", sa.String(100), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False, server_default="60"),
        sa.Column("is_mobile", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("last_synced_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.UniqueConstraint("branch_id", "platform_service_id", name="uq_service_branch_platform_id"),
    )
    op.create_index("ix_service_branch_id", "service", ["branch_id"])
    op.create_index("ix_service_platform_service_id", "service", ["platform_service_id"])

    # Booking
    op.create_table(
        "booking",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _branch_fk(),
        sa.Column("platform_record_id", sa.String(100), nullable=False),
        sa.Column("staff_id", sa.Uuid(), sa.ForeignKey("staff.id", ondelete="SET NULL")),
        sa.Column("service_id", sa.Uuid(), sa.ForeignKey("service.id", ondelete="SET NULL")),
        sa.Column("starts_at_utc", sa.DateTime(), nullable=False),
        sa.Column("ends_at_utc", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="booked"),
        sa.Column("is_mobile", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("client_name", sa.String(200)),
        sa.Column("client_phone", sa.String(50)),
        sa.Column("last_synced_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.UniqueConstraint("branch_id", "platform_record_id", name="uq_booking_branch_platform_id"),
    )
    op.create_index("ix_booking_branch_id", "booking", ["branch_id"])
    op.create_index("ix_booking_platform_record_id", "booking", ["platform_record_id"])
    op.create_index("ix_booking_branch_start", "booking", ["branch_id", "starts_at_utc"])

    # Sync audit log
    op.create_table(
        "sync_status",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _branch_fk(),
        sa.Column("sync_type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("synced_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("error_message", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_sync_status_branch_id", "sync_status", ["branch_id"])
    op.create_index("ix_sync_status_sync_type", "sync_status", ["sync_type"])


def downgrade() -> None:
    op.drop_table("sync_status")
    op.drop_table("booking")
    op.drop_table("service")
    op.drop_table("staff")
    op.drop_table("integration_settings")
    op.drop_table("branch")
