"""Objective activity routes (owner-facing)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from collab.application.usecase.activity import (
    GetActivityRequest,
    GetActivityResponse,
    GetActivityUseCase,
)
from collab.domain.service import JWTService
from collab.interface.api.auth import require_owner

router = APIRouter(prefix="/objectives", tags=["activity"], route_class=DishkaRoute)


@router.get("/{resource_id}/activity", response_model=GetActivityResponse)
async def get_activity(
    resource_id: str,
    activity_use_case: FromDishka[GetActivityUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=50, ge=1, le=50),
    auth_token: str | None = Cookie(default=None),
) -> GetActivityResponse:
    """Recent sharing activity on an objective, newest first."""
    payload = require_owner(jwt_service, auth_token)
    return await activity_use_case.execute(
        GetActivityRequest(
            user_id=payload.user_id, resource_id=resource_id, limit=limit
        )
    )
