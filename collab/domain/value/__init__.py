"""Domain value objects for sharing."""

from collab.domain.value.identifiers import (
    AccessRecordId,
    ActivityId,
    CommentId,
    InviteId,
    MemberId,
    ShareLinkId,
    UserId,
)
from collab.domain.value.types import (
    ActivityKind,
    Email,
    GuestAction,
    ObjectivePriority,
    ObjectiveStatus,
    ResourceId,
    ShareRole,
    ShareToken,
)

__all__ = [
    # Identifiers
    "ShareLinkId",
    "AccessRecordId",
    "InviteId",
    "CommentId",
    "ActivityId",
    "MemberId",
    "UserId",
    # Types
    "ActivityKind",
    "Email",
    "GuestAction",
    "ObjectivePriority",
    "ObjectiveStatus",
    "ResourceId",
    "ShareRole",
    "ShareToken",
]
