"""SQLAlchemy table definitions for objective sharing.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Predicate of the partial unique index on active links. Inserts that rely
# on the index for conflict detection must use the same predicate.
ACTIVE_LINK_PREDICATE = text("revoked = false")

# ============================================================================
# OBJECTIVES TABLE (the shared resource)
# ============================================================================
objectives_table = Table(
    "objectives",
    metadata,
    Column("id", String(128), primary_key=True),
    Column("owner_id", String(255), nullable=False),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="not_started"),
    Column("priority", String(20), nullable=False, server_default="medium"),
    Column("completion_percentage", Integer, nullable=False, server_default="0"),
    Column("target_date", Date, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('not_started', 'in_progress', 'on_hold', 'completed')",
        name="check_objective_status",
    ),
    CheckConstraint(
        "priority IN ('low', 'medium', 'high', 'critical')",
        name="check_objective_priority",
    ),
    CheckConstraint(
        "completion_percentage BETWEEN 0 AND 100",
        name="check_objective_completion",
    ),
)

Index("idx_objectives_owner_id", objectives_table.c.owner_id)

# ============================================================================
# OBJECTIVE LINKS TABLE (persistent share links)
# ============================================================================
objective_links_table = Table(
    "objective_links",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "objective_id",
        String(128),
        ForeignKey("objectives.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("role", String(10), nullable=False),
    Column("token", String(255), nullable=False, unique=True),
    Column("revoked", Boolean, nullable=False, server_default="false"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("created_by", String(255), nullable=True),
    CheckConstraint("role IN ('viewer', 'editor')", name="check_link_role"),
)

# At most one non-revoked link per (objective, role)
Index(
    "uq_objective_links_active",
    objective_links_table.c.objective_id,
    objective_links_table.c.role,
    unique=True,
    postgresql_where=ACTIVE_LINK_PREDICATE,
)
Index(
    "idx_objective_links_objective",
    objective_links_table.c.objective_id,
    objective_links_table.c.created_at.desc(),
)

# ============================================================================
# OBJECTIVE LINK ACCESS TABLE (append-only audit trail)
# ============================================================================
objective_link_access_table = Table(
    "objective_link_access",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "link_id",
        UUID(as_uuid=True),
        ForeignKey("objective_links.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("email", String(255), nullable=True),
    Column(
        "accessed_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index(
    "idx_objective_link_access_link",
    objective_link_access_table.c.link_id,
    objective_link_access_table.c.accessed_at.desc(),
)

# ============================================================================
# OBJECTIVE INVITES TABLE (email-targeted tokens)
# ============================================================================
objective_invites_table = Table(
    "objective_invites",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "objective_id",
        String(128),
        ForeignKey("objectives.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("email", String(255), nullable=False),
    Column("role", String(10), nullable=False),
    Column("token", String(255), nullable=False, unique=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    Column("single_use", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("invited_by", String(255), nullable=True),
    CheckConstraint("role IN ('viewer', 'editor')", name="check_invite_role"),
)

Index(
    "idx_objective_invites_objective",
    objective_invites_table.c.objective_id,
    objective_invites_table.c.created_at.desc(),
)

# ============================================================================
# OBJECTIVE COLLABORATOR ROSTER TABLE
# ============================================================================
objective_collab_members_table = Table(
    "objective_collab_members",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "objective_id",
        String(128),
        ForeignKey("objectives.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("email", String(255), nullable=False),
    Column("role", String(10), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("objective_id", "email", name="uq_objective_collab_members_email"),
    CheckConstraint("role IN ('viewer', 'editor')", name="check_member_role"),
)

# ============================================================================
# OBJECTIVE COMMENTS TABLE
# ============================================================================
objective_comments_table = Table(
    "objective_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "objective_id",
        String(128),
        ForeignKey("objectives.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", String(255), nullable=True),  # NULL for guests
    Column("author_email", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(body) BETWEEN 1 AND 5000", name="check_comment_body_length"
    ),
)

Index(
    "idx_objective_comments_objective",
    objective_comments_table.c.objective_id,
    objective_comments_table.c.created_at,
)

# ============================================================================
# OBJECTIVE ACTIVITY TABLE
# ============================================================================
objective_activity_table = Table(
    "objective_activity",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "objective_id",
        String(128),
        ForeignKey("objectives.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("kind", String(20), nullable=False),
    Column("data", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_objective_activity_objective",
    objective_activity_table.c.objective_id,
    objective_activity_table.c.created_at.desc(),
)
