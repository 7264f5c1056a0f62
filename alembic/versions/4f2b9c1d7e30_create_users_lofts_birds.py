"""Create users, lofts and birds

Revision ID: 4f2b9c1d7e30
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2b9c1d7e30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
    ]


def _soft_delete() -> list[sa.Column]:
    return [
        sa.Column("status", sa.String(length=20), server_default="active", nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index("ix_users_email_lower", "users", [sa.text("lower(email)")], unique=True)

    op.create_table(
        "lofts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_lofts_id"), "lofts", ["id"], unique=False)
    op.create_index(op.f("ix_lofts_owner_id"), "lofts", ["owner_id"], unique=False)
    op.create_index(op.f("ix_lofts_status"), "lofts", ["status"], unique=False)

    op.create_table(
        "birds",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("ring", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=60), nullable=True),
        sa.Column("loft_id", sa.Integer(), nullable=True),
        *_timestamps(),
        *_soft_delete(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["loft_id"], ["lofts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_birds_id"), "birds", ["id"], unique=False)
    op.create_index(op.f("ix_birds_owner_id"), "birds", ["owner_id"], unique=False)
    op.create_index(op.f("ix_birds_loft_id"), "birds", ["loft_id"], unique=False)
    op.create_index(op.f("ix_birds_status"), "birds", ["status"], unique=False)
    op.create_index("uq_birds_ring", "birds", ["ring"], unique=True)


def downgrade() -> None:
    op.drop_index("uq_birds_ring", table_name="birds")
    op.drop_index(op.f("ix_birds_status"), table_name="birds")
    op.drop_index(op.f("ix_birds_loft_id"), table_name="birds")
    op.drop_index(op.f("ix_birds_owner_id"), table_name="birds")
    op.drop_index(op.f("ix_birds_id"), table_name="birds")
    op.drop_table("birds")

    op.drop_index(op.f("ix_lofts_status"), table_name="lofts")
    op.drop_index(op.f("ix_lofts_owner_id"), table_name="lofts")
    op.drop_index(op.f("ix_lofts_id"), table_name="lofts")
    op.drop_table("lofts")

    op.drop_index("ix_users_email_lower", table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
