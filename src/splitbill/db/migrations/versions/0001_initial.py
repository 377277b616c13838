"""initial schema

Revision ID: 0001
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "groups",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "group_members",
        sa.Column("group_id", sa.BigInteger(), sa.ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("name", sa.Text(), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.UniqueConstraint("group_id", "position", name="group_members_position_key"),
    )

    op.create_table(
        "expenses",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("group_id", sa.BigInteger(), sa.ForeignKey("groups.id", ondelete="CASCADE"), nullable=False),
        sa.Column("label", sa.Text(), nullable=False),
        sa.Column("payer", sa.Text(), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("amount > 0", name="expenses_amount_positive"),
        sa.ForeignKeyConstraint(
            ["group_id", "payer"],
            ["group_members.group_id", "group_members.name"],
            name="expenses_payer_member_fkey",
        ),
    )

    op.create_index("idx_group_members_group", "group_members", ["group_id"])
    op.create_index("idx_expenses_group", "expenses", ["group_id"])


def downgrade() -> None:
    op.drop_index("idx_expenses_group", table_name="expenses")
    op.drop_index("idx_group_members_group", table_name="group_members")

    op.drop_table("expenses")
    op.drop_table("group_members")
    op.drop_table("groups")
