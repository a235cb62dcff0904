"""Share link routes (owner-facing)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from collab.application.usecase.link import (
    CreateShareLinkRequest,
    CreateShareLinkResponse,
    CreateShareLinkUseCase,
    ListLinkAccessRequest,
    ListLinkAccessResponse,
    ListLinkAccessUseCase,
    ListShareLinksRequest,
    ListShareLinksResponse,
    ListShareLinksUseCase,
    RevokeShareLinkRequest,
    RevokeShareLinkResponse,
    RevokeShareLinkUseCase,
)
from collab.domain.service import JWTService
from collab.interface.api.auth import require_owner

router = APIRouter(prefix="/links", tags=["links"], route_class=DishkaRoute)


# Declared before "/{resource_id}" so "revoke" is not taken for an id
@router.post("/revoke", response_model=RevokeShareLinkResponse)
async def revoke_link_by_token(
    revoke_use_case: FromDishka[RevokeShareLinkUseCase],
    jwt_service: FromDishka[JWTService],
    token: str = Query(min_length=1, max_length=255),
    auth_token: str | None = Cookie(default=None),
) -> RevokeShareLinkResponse:
    """Revoke the link holding ``token``.

    Revoking an already revoked link succeeds without changes.

    Raises:
        HTTPException: 401 if not authenticated
    """
    payload = require_owner(jwt_service, auth_token)
    return await revoke_use_case.execute(
        RevokeShareLinkRequest(user_id=payload.user_id, token=token)
    )


@router.post("/{resource_id}", response_model=CreateShareLinkResponse)
async def get_or_create_link(
    resource_id: str,
    create_use_case: FromDishka[CreateShareLinkUseCase],
    jwt_service: FromDishka[JWTService],
    role: str = Query(),
    expires_in_days: int | None = Query(default=None, ge=1, le=3650),
    auth_token: str | None = Cookie(default=None),
) -> CreateShareLinkResponse:
    """Get the share link for an objective and role, creating it if needed.

    Calling this repeatedly returns the same URL until the link is revoked.

    Args:
        resource_id: Objective to share
        create_use_case: Create share link use case from DI
        jwt_service: JWT service from DI
        role: "viewer" or "editor"
        expires_in_days: Optional expiry for a newly created link
        auth_token: JWT token from cookie

    Returns:
        Share URL and link details

    Raises:
        HTTPException: 401 if not authenticated
    """
    payload = require_owner(jwt_service, auth_token)
    return await create_use_case.execute(
        CreateShareLinkRequest(
            user_id=payload.user_id,
            resource_id=resource_id,
            role=role,
            expires_in_days=expires_in_days,
        )
    )


@router.delete("/{resource_id}", response_model=RevokeShareLinkResponse)
async def revoke_link_by_role(
    resource_id: str,
    revoke_use_case: FromDishka[RevokeShareLinkUseCase],
    jwt_service: FromDishka[JWTService],
    role: str = Query(),
    auth_token: str | None = Cookie(default=None),
) -> RevokeShareLinkResponse:
    """Revoke the active link of an objective for one role."""
    payload = require_owner(jwt_service, auth_token)
    return await revoke_use_case.execute(
        RevokeShareLinkRequest(
            user_id=payload.user_id, resource_id=resource_id, role=role
        )
    )


@router.get("/{resource_id}", response_model=ListShareLinksResponse)
async def list_links(
    resource_id: str,
    list_use_case: FromDishka[ListShareLinksUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListShareLinksResponse:
    """List every link issued for an objective, revoked ones included."""
    payload = require_owner(jwt_service, auth_token)
    return await list_use_case.execute(
        ListShareLinksRequest(user_id=payload.user_id, resource_id=resource_id)
    )


@router.get("/{resource_id}/access", response_model=ListLinkAccessResponse)
async def list_link_access(
    resource_id: str,
    access_use_case: FromDishka[ListLinkAccessUseCase],
    jwt_service: FromDishka[JWTService],
    link_id: UUID = Query(),
    limit: int = Query(default=100, ge=1, le=500),
    auth_token: str | None = Cookie(default=None),
) -> ListLinkAccessResponse:
    """List who opened a link, newest first."""
    payload = require_owner(jwt_service, auth_token)
    return await access_use_case.execute(
        ListLinkAccessRequest(
            user_id=payload.user_id,
            resource_id=resource_id,
            link_id=link_id,
            limit=limit,
        )
    )
