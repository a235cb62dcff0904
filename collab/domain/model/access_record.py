"""Access record entity (append-only audit trail of link redemptions)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import AccessRecordId, ShareLinkId
from collab.util.clock import utc_now


class AccessRecord(DomainModel):
    """One successful resolution of a share link."""

    id: AccessRecordId
    link_id: ShareLinkId
    email: Optional[str] = None  # None for anonymous guests
    accessed_at: datetime = Field(default_factory=utc_now)
