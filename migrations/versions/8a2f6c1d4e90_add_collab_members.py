"""add_collab_members

Add the collaborator roster: named members of an objective with the role
each was given.

Revision ID: 8a2f6c1d4e90
Revises: 3c41d9e07b52
Create Date: 2026-10-19 15:40:02.517903

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8a2f6c1d4e90"
down_revision: Union[str, Sequence[str], None] = "3c41d9e07b52"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "objective_collab_members",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("objective_id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(10), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["objective_id"], ["objectives.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "objective_id", "email", name="uq_objective_collab_members_email"
        ),
        sa.CheckConstraint("role IN ('viewer', 'editor')", name="check_member_role"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("objective_collab_members")
