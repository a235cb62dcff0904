"""Get activity use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from collab.application.usecase.base import BaseUseCase
from collab.domain.service import ActivityService, ObjectiveService
from collab.domain.service.base import parse_resource_id
from collab.domain.value import ActivityKind, UserId


class ActivityItem(BaseModel):
    """One activity feed entry."""

    kind: ActivityKind
    data: dict[str, Any]
    created_at: datetime


class GetActivityRequest(BaseModel):
    """Request for an objective's activity feed."""

    user_id: str
    resource_id: str
    limit: int = Field(default=50, ge=1, le=50)


class GetActivityResponse(BaseModel):
    """Activity, newest first."""

    activity: list[ActivityItem]


class GetActivityUseCase(BaseUseCase):
    """Use case for the owner's activity feed."""

    def __init__(
        self, activity_service: ActivityService, objective_service: ObjectiveService
    ) -> None:
        self.activity_service = activity_service
        self.objective_service = objective_service

    async def execute(self, request: GetActivityRequest) -> GetActivityResponse:
        resource_id = parse_resource_id(request.resource_id)
        await self.objective_service.require_owned(
            resource_id, UserId(request.user_id)
        )

        entries = await self.activity_service.list_recent(resource_id, request.limit)
        return GetActivityResponse(
            activity=[
                ActivityItem(kind=a.kind, data=a.data, created_at=a.created_at)
                for a in entries
            ]
        )
