"""Invite routes (owner-facing)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, ConfigDict, Field

from collab.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from collab.domain.service import JWTService
from collab.interface.api.auth import require_owner

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite."""

    model_config = ConfigDict(populate_by_name=True)

    resource_id: str = Field(alias="resourceId")
    email: str
    role: str


@router.post(
    "", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateInviteResponse:
    """Create an email-targeted invite.

    Args:
        request: Objective, invitee email and role
        create_invite_use_case: Create invite use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Invite token and redemption link

    Raises:
        HTTPException: 401 if not authenticated
    """
    payload = require_owner(jwt_service, auth_token)
    return await create_invite_use_case.execute(
        CreateInviteRequest(
            user_id=payload.user_id,
            resource_id=request.resource_id,
            email=request.email,
            role=request.role,
        )
    )


@router.get("", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    resource_id: str = Query(),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListInvitesResponse:
    """List invites created for an objective.

    Args:
        list_invites_use_case: List invites use case from DI
        jwt_service: JWT service from DI
        resource_id: Objective ID
        limit: Maximum number of results (1-100)
        offset: Number of results to skip
        auth_token: JWT token from cookie

    Returns:
        List of invites
    """
    payload = require_owner(jwt_service, auth_token)
    return await list_invites_use_case.execute(
        ListInvitesRequest(
            user_id=payload.user_id,
            resource_id=resource_id,
            limit=limit,
            offset=offset,
        )
    )
