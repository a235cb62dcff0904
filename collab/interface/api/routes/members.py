"""Collaborator roster routes (owner-facing)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from collab.application.usecase.member import (
    AddMemberRequest,
    AddMemberResponse,
    AddMemberUseCase,
    ListMembersRequest,
    ListMembersResponse,
    ListMembersUseCase,
    RemoveMemberRequest,
    RemoveMemberResponse,
    RemoveMemberUseCase,
)
from collab.domain.service import JWTService
from collab.interface.api.auth import require_owner

router = APIRouter(prefix="/objectives", tags=["members"], route_class=DishkaRoute)


class AddMemberAPIRequest(BaseModel):
    """API request for adding a collaborator."""

    email: str
    role: str


@router.get("/{resource_id}/members", response_model=ListMembersResponse)
async def list_members(
    resource_id: str,
    list_members_use_case: FromDishka[ListMembersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListMembersResponse:
    """Collaborators on an objective, earliest joined first."""
    payload = require_owner(jwt_service, auth_token)
    return await list_members_use_case.execute(
        ListMembersRequest(user_id=payload.user_id, resource_id=resource_id)
    )


@router.post(
    "/{resource_id}/members",
    response_model=AddMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_member(
    resource_id: str,
    request: AddMemberAPIRequest,
    add_member_use_case: FromDishka[AddMemberUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddMemberResponse:
    """Add a collaborator, or change the role of an existing one.

    Args:
        resource_id: Objective to add the collaborator to
        request: Collaborator email and role
        add_member_use_case: Add member use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        The stored collaborator

    Raises:
        HTTPException: 401 if not authenticated
    """
    payload = require_owner(jwt_service, auth_token)
    return await add_member_use_case.execute(
        AddMemberRequest(
            user_id=payload.user_id,
            resource_id=resource_id,
            email=request.email,
            role=request.role,
        )
    )


@router.delete("/{resource_id}/members", response_model=RemoveMemberResponse)
async def remove_member(
    resource_id: str,
    remove_member_use_case: FromDishka[RemoveMemberUseCase],
    jwt_service: FromDishka[JWTService],
    email: str = Query(min_length=1, max_length=255),
    auth_token: str | None = Cookie(default=None),
) -> RemoveMemberResponse:
    """Remove a collaborator by email."""
    payload = require_owner(jwt_service, auth_token)
    return await remove_member_use_case.execute(
        RemoveMemberRequest(
            user_id=payload.user_id, resource_id=resource_id, email=email
        )
    )
