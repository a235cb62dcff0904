"""Invite entity.

Invites are email-targeted capability tokens. Unlike share links they
always expire, and they may be modeled as single-use.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import (
    Email,
    InviteId,
    ResourceId,
    ShareRole,
    ShareToken,
    UserId,
)
from collab.util.clock import utc_now


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - ``expires_at`` is always set; redemption after it fails
    - ``used_at`` goes from None to a timestamp at most once, and only for
      single-use invites; a single-use invite with ``used_at`` set can not
      be redeemed again
    """

    id: InviteId
    resource_id: ResourceId
    email: Email
    role: ShareRole
    token: ShareToken
    expires_at: datetime
    used_at: Optional[datetime] = None
    single_use: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    invited_by: Optional[UserId] = None

    def is_expired(self, now: datetime) -> bool:
        """Whether the invite is past its expiry at ``now``."""
        return self.expires_at <= now

    @property
    def guest_label(self) -> str:
        """Author label for content posted through this invite."""
        return f"{self.email.root} (guest)"
