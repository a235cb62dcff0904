"""Strongly typed identifiers for sharing entities."""

from typing import NewType
from uuid import UUID

ShareLinkId = NewType("ShareLinkId", UUID)
AccessRecordId = NewType("AccessRecordId", UUID)
InviteId = NewType("InviteId", UUID)
CommentId = NewType("CommentId", UUID)
ActivityId = NewType("ActivityId", UUID)
MemberId = NewType("MemberId", UUID)

# Owners come from the external identity provider; ids are opaque strings
UserId = NewType("UserId", str)
