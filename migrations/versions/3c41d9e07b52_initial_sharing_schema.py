"""initial_sharing_schema

Create the schema for objective sharing:
- Objectives (the shared resource, owned by one user)
- Objective Links (one active token per objective and role)
- Objective Link Access (who opened a link, and when)
- Objective Invites (email-targeted tokens)
- Objective Comments (owner and guest comments)
- Objective Activity (sharing timeline)

Revision ID: 3c41d9e07b52
Revises:
Create Date: 2026-10-19 09:12:44.180331

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d9e07b52"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # OBJECTIVES table
    # ========================================================================
    op.create_table(
        "objectives",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status", sa.String(20), nullable=False, server_default="not_started"
        ),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column(
            "completion_percentage", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("target_date", sa.Date(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('not_started', 'in_progress', 'on_hold', 'completed')",
            name="check_objective_status",
        ),
        sa.CheckConstraint(
            "priority IN ('low', 'medium', 'high', 'critical')",
            name="check_objective_priority",
        ),
        sa.CheckConstraint(
            "completion_percentage BETWEEN 0 AND 100",
            name="check_objective_completion",
        ),
    )
    op.create_index("idx_objectives_owner_id", "objectives", ["owner_id"])

    # ========================================================================
    # OBJECTIVE_LINKS table
    # ========================================================================
    op.create_table(
        "objective_links",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("objective_id", sa.String(128), nullable=False),
        sa.Column("role", sa.String(10), nullable=False),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column("revoked", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(
            ["objective_id"], ["objectives.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_objective_links_token"),
        sa.CheckConstraint("role IN ('viewer', 'editor')", name="check_link_role"),
    )
    # At most one non-revoked link per (objective, role)
    op.create_index(
        "uq_objective_links_active",
        "objective_links",
        ["objective_id", "role"],
        unique=True,
        postgresql_where=sa.text("revoked = false"),
    )
    op.create_index(
        "idx_objective_links_objective",
        "objective_links",
        ["objective_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # OBJECTIVE_LINK_ACCESS table
    # ========================================================================
    op.create_table(
        "objective_link_access",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("link_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column(
            "accessed_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["link_id"], ["objective_links.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_objective_link_access_link",
        "objective_link_access",
        ["link_id", sa.text("accessed_at DESC")],
    )

    # ========================================================================
    # OBJECTIVE_INVITES table
    # ========================================================================
    op.create_table(
        "objective_invites",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("objective_id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(10), nullable=False),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("used_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("single_use", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("invited_by", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(
            ["objective_id"], ["objectives.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_objective_invites_token"),
        sa.CheckConstraint("role IN ('viewer', 'editor')", name="check_invite_role"),
    )
    op.create_index(
        "idx_objective_invites_objective",
        "objective_invites",
        ["objective_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # OBJECTIVE_COMMENTS table
    # ========================================================================
    op.create_table(
        "objective_comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("objective_id", sa.String(128), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=True),  # NULL for guests
        sa.Column("author_email", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["objective_id"], ["objectives.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(body) BETWEEN 1 AND 5000", name="check_comment_body_length"
        ),
    )
    op.create_index(
        "idx_objective_comments_objective",
        "objective_comments",
        ["objective_id", "created_at"],
    )

    # ========================================================================
    # OBJECTIVE_ACTIVITY table
    # ========================================================================
    op.create_table(
        "objective_activity",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("objective_id", sa.String(128), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column(
            "data",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["objective_id"], ["objectives.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_objective_activity_objective",
        "objective_activity",
        ["objective_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("objective_activity")
    op.drop_table("objective_comments")
    op.drop_table("objective_invites")
    op.drop_table("objective_link_access")
    op.drop_table("objective_links")
    op.drop_table("objectives")
