"""Domain value objects for sharing.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from collab.domain.value.common import RootValueObject


class GuestAction(str, Enum):
    """Something a token holder can do with a shared resource."""

    VIEW = "view"
    COMMENT = "comment"
    EDIT = "edit"


class ShareRole(str, Enum):
    """Capability granted by a link or invite."""

    VIEWER = "viewer"
    EDITOR = "editor"

    def allows(self, action: GuestAction) -> bool:
        """Whether this role grants the given action."""
        return action in _ROLE_CAPABILITIES[self]


_ROLE_CAPABILITIES: dict[ShareRole, frozenset[GuestAction]] = {
    ShareRole.VIEWER: frozenset({GuestAction.VIEW, GuestAction.COMMENT}),
    ShareRole.EDITOR: frozenset(
        {GuestAction.VIEW, GuestAction.COMMENT, GuestAction.EDIT}
    ),
}


class ObjectiveStatus(str, Enum):
    """Progress state of an objective."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"


class ObjectivePriority(str, Enum):
    """Priority of an objective."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ActivityKind(str, Enum):
    """Kinds of entries in an objective's activity feed."""

    INVITE = "invite"
    COMMENT = "comment"
    STATUS = "status"
    LINK_CREATED = "link_created"
    LINK_REVOKED = "link_revoked"


class ResourceId(RootValueObject[str]):
    """Identifier of a shared resource.

    Accepts UUIDs and slug-like ids such as ``obj-1``.
    """

    @field_validator("root")
    @classmethod
    def validate_resource_id(cls, v: str) -> str:
        """Validate resource id format."""
        if not re.match(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,127}$", v):
            raise ValueError(
                "Resource id must be 1-128 characters: letters, digits, '-' or '_'"
            )
        return v


class ShareToken(RootValueObject[str]):
    """Capability token presented by a guest."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v


class Email(RootValueObject[str]):
    """Email address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the address has the local@domain.tld shape."""
        v = v.strip().lower()
        if len(v) > 255:
            raise ValueError("Email must be less than 255 characters")
        if not re.match(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", v):
            raise ValueError("Invalid email address")
        return v
