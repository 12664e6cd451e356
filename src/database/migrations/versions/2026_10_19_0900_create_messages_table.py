"""Create messages table

Revision ID: 3f6c1d2a9b04
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f6c1d2a9b04"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "messages",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.String(length=1000), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_messages_organization_id", "messages", ["organization_id"], unique=False
    )
    # Case-insensitive title uniqueness per organization
    op.create_index(
        "uq_messages_organization_id_title_lower",
        "messages",
        ["organization_id", sa.text("lower(title)")],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("uq_messages_organization_id_title_lower", table_name="messages")
    op.drop_index("ix_messages_organization_id", table_name="messages")
    op.drop_table("messages")
