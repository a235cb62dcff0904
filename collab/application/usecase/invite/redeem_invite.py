"""Redeem invite use case (guest comment through an invite token)."""

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.share.open_shared_objective import CommentItem
from collab.domain.error import InvalidTokenError, ValidationError
from collab.domain.service import ActivityService, CommentService, InviteService
from collab.domain.service.base import parse_resource_id, parse_token
from collab.domain.service.comment_service import normalize_comment_body
from collab.domain.value import ActivityKind, GuestAction


class RedeemInviteRequest(BaseModel):
    """Guest redemption request."""

    token: str
    body: str
    resource_id: str | None = None  # When given, must match the invite


class RedeemInviteResponse(BaseModel):
    """Redemption result."""

    ok: bool = True
    comment: CommentItem


class RedeemInviteUseCase(BaseUseCase):
    """Use case for posting a comment with an invite token.

    The comment is attributed to "<invite email> (guest)".
    """

    def __init__(
        self,
        invite_service: InviteService,
        comment_service: CommentService,
        activity_service: ActivityService,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            comment_service: Comment domain service
            activity_service: Activity domain service
        """
        self.invite_service = invite_service
        self.comment_service = comment_service
        self.activity_service = activity_service

    async def execute(self, request: RedeemInviteRequest) -> RedeemInviteResponse:
        """Execute redeem flow.

        Steps:
        1. Validate the comment body, so a bad body never consumes an invite
        2. Redeem the invite for the comment action
        3. Insert the comment and record activity

        Raises:
            AccessDeniedError: If the invite is unknown, used, expired, for
                another objective, or lacks comment rights
            ValidationError: If the body is empty or too long
        """
        token = parse_token(request.token)
        body = normalize_comment_body(request.body)

        resource_id = None
        if request.resource_id:
            try:
                resource_id = parse_resource_id(request.resource_id)
            except ValidationError:
                raise InvalidTokenError()

        with logfire.span("redeem_invite"):
            invite = await self.invite_service.redeem(
                token, GuestAction.COMMENT, resource_id=resource_id
            )

            comment = await self.comment_service.create_comment(
                invite.resource_id, author_email=invite.guest_label, body=body
            )
            await self.activity_service.record(
                invite.resource_id,
                ActivityKind.COMMENT,
                {"author_email": invite.guest_label, "via": "invite"},
            )
            return RedeemInviteResponse(comment=CommentItem.from_comment(comment))
