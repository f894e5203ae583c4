"""add saved_inputs

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-10-19 09:12:31.418207

"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c2a9b7d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "saved_inputs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("profile_id", sa.String(length=255), nullable=False),
        sa.Column("key", sa.String(length=64), nullable=False),
        sa.Column("value", sa.String(length=64), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("profile_id", "key", name="uq_saved_inputs_profile_key"),
    )
    op.create_index(
        op.f("ix_saved_inputs_profile_id"), "saved_inputs", ["profile_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_saved_inputs_profile_id"), table_name="saved_inputs")
    op.drop_table("saved_inputs")
