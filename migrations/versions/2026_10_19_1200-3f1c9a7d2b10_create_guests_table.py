"""create guests table

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c9a7d2b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "guests",
        sa.Column("uuid", sqlalchemy_utils.UUIDType(binary=False), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("guest_count", sa.Integer(), nullable=False),
        sa.Column("attending", sa.Boolean(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_guests_name"), "guests", ["name"], unique=False)
    op.create_index(op.f("ix_guests_email"), "guests", ["email"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_guests_email"), table_name="guests")
    op.drop_index(op.f("ix_guests_name"), table_name="guests")
    op.drop_table("guests")
