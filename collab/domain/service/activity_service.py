"""Activity feed domain service."""

from typing import Any
from uuid import uuid4

import logfire

from collab.domain.model.activity import Activity
from collab.domain.repository import ActivityRepository
from collab.domain.value import ActivityId, ActivityKind, ResourceId
from collab.util.clock import Clock, utc_now

from .base import Service


class ActivityService(Service):
    """Records and lists sharing activity for an objective."""

    def __init__(
        self, activity_repository: ActivityRepository, clock: Clock = utc_now
    ) -> None:
        self.activity_repository = activity_repository
        self.clock = clock

    async def record(
        self,
        resource_id: ResourceId,
        kind: ActivityKind,
        data: dict[str, Any] | None = None,
    ) -> Activity:
        """Append an entry to the objective's feed.

        ``data`` must never carry raw tokens.
        """
        with logfire.span(
            "activity_service.record", resource_id=resource_id.root, kind=kind.value
        ):
            activity = Activity(
                id=ActivityId(uuid4()),
                resource_id=resource_id,
                kind=kind,
                data=data or {},
                created_at=self.clock(),
            )
            return await self.activity_repository.append(activity)

    async def list_recent(
        self, resource_id: ResourceId, limit: int = 50
    ) -> list[Activity]:
        """List the most recent entries, newest first."""
        with logfire.span(
            "activity_service.list_recent", resource_id=resource_id.root, limit=limit
        ):
            return await self.activity_repository.find_recent(resource_id, limit)
