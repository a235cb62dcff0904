"""Invite redemption routes (guest-facing)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from collab.application.usecase.invite import (
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)

router = APIRouter(tags=["redeem"], route_class=DishkaRoute)


class RedeemAPIRequest(BaseModel):
    """API request for redeeming an invite with a comment."""

    model_config = ConfigDict(populate_by_name=True)

    token: str
    body: str = Field(max_length=10000)
    resource_id: str | None = Field(default=None, alias="resourceId")


@router.get("/redeem", response_model=RedeemInviteResponse)
async def redeem_via_query(
    redeem_use_case: FromDishka[RedeemInviteUseCase],
    token: str = Query(),
    body: str = Query(max_length=10000),
    resource_id: str | None = Query(default=None),
) -> RedeemInviteResponse:
    """Post a comment using an invite token passed in the query string."""
    return await redeem_use_case.execute(
        RedeemInviteRequest(token=token, body=body, resource_id=resource_id)
    )


@router.post("/redeem", response_model=RedeemInviteResponse)
async def redeem(
    request: RedeemAPIRequest,
    redeem_use_case: FromDishka[RedeemInviteUseCase],
) -> RedeemInviteResponse:
    """Post a comment using an invite token."""
    return await redeem_use_case.execute(
        RedeemInviteRequest(
            token=request.token, body=request.body, resource_id=request.resource_id
        )
    )
