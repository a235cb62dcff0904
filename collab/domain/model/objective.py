"""Objective entity (the shared resource).

Only the fields needed to render and edit a shared objective are modeled.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import ObjectivePriority, ObjectiveStatus, ResourceId, UserId
from collab.util.clock import utc_now


class Objective(DomainModel):
    """Strategic objective owned by a single user."""

    id: ResourceId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = None
    status: ObjectiveStatus = ObjectiveStatus.NOT_STARTED
    priority: ObjectivePriority = ObjectivePriority.MEDIUM
    completion_percentage: int = Field(default=0, ge=0, le=100)
    target_date: Optional[date] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
