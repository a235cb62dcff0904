"""Local capability routes.

Only served when ``sharing.local_mode_enabled`` is set. Tokens handled here
live in a local file and are not checked by any server: demo and offline
use only.

The store does blocking file I/O, so service calls run in a worker thread.
"""

import asyncio

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from collab.config import Settings
from collab.domain.model.local_share import AcceptedShare
from collab.domain.service import LocalShareService
from collab.domain.service.base import parse_role

router = APIRouter(prefix="/local/shares", tags=["local"], route_class=DishkaRoute)


class LocalTokenResponse(BaseModel):
    """Token for a role slot and its share URL."""

    token: str
    url: str


class AcceptLocalShareAPIRequest(BaseModel):
    """API request for accepting a local share."""

    token: str
    role: str


class AcceptLocalShareResponse(BaseModel):
    """Whether the token matched the role slot."""

    accepted: bool


class RevokeLocalShareAPIRequest(BaseModel):
    """API request for revoking a local share."""

    token: str


class RevokeLocalShareResponse(BaseModel):
    """Whether a slot was cleared."""

    revoked: bool


class ListLocalSharesResponse(BaseModel):
    """Shares accepted on this device."""

    shares: list[AcceptedShare]


def _require_local_mode(settings: Settings) -> None:
    if not settings.sharing.local_mode_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


@router.get("", response_model=ListLocalSharesResponse)
async def list_local_shares(
    settings: FromDishka[Settings],
    local_share_service: FromDishka[LocalShareService],
) -> ListLocalSharesResponse:
    """List accepted local shares."""
    _require_local_mode(settings)
    shares = await asyncio.to_thread(local_share_service.list_accepted)
    return ListLocalSharesResponse(shares=shares)


@router.post("/{resource_id}/token", response_model=LocalTokenResponse)
async def get_or_create_local_token(
    resource_id: str,
    settings: FromDishka[Settings],
    local_share_service: FromDishka[LocalShareService],
    role: str = Query(),
) -> LocalTokenResponse:
    """Get the local token for a role, minting one if the slot is empty."""
    _require_local_mode(settings)
    token = await asyncio.to_thread(
        local_share_service.get_or_create_token, resource_id, parse_role(role)
    )
    return LocalTokenResponse(token=token, url=settings.share_url(token))


@router.post("/{resource_id}/accept", response_model=AcceptLocalShareResponse)
async def accept_local_share(
    resource_id: str,
    request: AcceptLocalShareAPIRequest,
    settings: FromDishka[Settings],
    local_share_service: FromDishka[LocalShareService],
) -> AcceptLocalShareResponse:
    """Accept a local share. Tokens not matching the role slot are ignored."""
    _require_local_mode(settings)
    accepted = await asyncio.to_thread(
        local_share_service.accept_share,
        request.token,
        parse_role(request.role),
        resource_id,
    )
    return AcceptLocalShareResponse(accepted=accepted)


@router.post("/{resource_id}/revoke", response_model=RevokeLocalShareResponse)
async def revoke_local_share(
    resource_id: str,
    request: RevokeLocalShareAPIRequest,
    settings: FromDishka[Settings],
    local_share_service: FromDishka[LocalShareService],
) -> RevokeLocalShareResponse:
    """Clear the slot holding the token."""
    _require_local_mode(settings)
    revoked = await asyncio.to_thread(
        local_share_service.revoke_share, resource_id, request.token
    )
    return RevokeLocalShareResponse(revoked=revoked)
