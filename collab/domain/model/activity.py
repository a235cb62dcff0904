"""Activity entity (per-objective feed of sharing events)."""

from datetime import datetime
from typing import Any

from pydantic import Field

from collab.domain.model.common import DomainModel
from collab.domain.value import ActivityId, ActivityKind, ResourceId
from collab.util.clock import utc_now


class Activity(DomainModel):
    """One entry in an objective's activity feed."""

    id: ActivityId
    resource_id: ResourceId
    kind: ActivityKind
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utc_now)
