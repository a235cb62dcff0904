"""Comment entity.

Comments are a flat discussion on an objective, posted by the owner or by
guests holding a link or invite token.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import CommentId, ResourceId, UserId
from collab.util.clock import utc_now


class Comment(DomainModel):
    """Comment on an objective."""

    id: CommentId
    resource_id: ResourceId
    author_id: Optional[UserId] = None  # None for guests
    author_email: str
    body: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=utc_now)
