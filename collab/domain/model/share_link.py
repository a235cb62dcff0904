"""Share link entity.

A share link is a persistent, reusable, revocable capability token bound
to a (resource, role) pair. Anyone holding the token may open the
resource at the link's role.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import ResourceId, ShareLinkId, ShareRole, ShareToken, UserId
from collab.util.clock import utc_now


class ShareLink(DomainModel):
    """Share link entity.

    Business rules:
    - At most one non-revoked link per (resource_id, role)
    - ``revoked`` only ever goes from False to True
    - Links are never deleted (kept for the access audit trail)
    - A new link for the same pair exists only after the prior one is
      revoked or expired
    """

    id: ShareLinkId
    resource_id: ResourceId
    role: ShareRole
    token: ShareToken
    revoked: bool = False
    expires_at: Optional[datetime] = None  # None means no expiry
    created_at: datetime = Field(default_factory=utc_now)
    created_by: Optional[UserId] = None

    def is_expired(self, now: datetime) -> bool:
        """Whether the link is past its expiry at ``now``."""
        return self.expires_at is not None and self.expires_at <= now

    def is_active(self, now: datetime) -> bool:
        """Whether the link can currently be redeemed."""
        return not self.revoked and not self.is_expired(now)
