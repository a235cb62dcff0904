"""Invite use cases."""

from collab.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    InviteItem,
)
from collab.application.usecase.invite.list_invites import (
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from collab.application.usecase.invite.redeem_invite import (
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)

__all__ = [
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "InviteItem",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "RedeemInviteRequest",
    "RedeemInviteResponse",
    "RedeemInviteUseCase",
]
