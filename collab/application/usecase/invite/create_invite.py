"""Create invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.config import Settings
from collab.domain.model.invite import Invite
from collab.domain.service import ActivityService, InviteService, ObjectiveService
from collab.domain.service.base import parse_email, parse_resource_id, parse_role
from collab.domain.value import ActivityKind, ShareRole, UserId


class InviteItem(BaseModel):
    """Invite as shown to the objective owner."""

    invite_id: str
    resource_id: str
    email: str
    role: ShareRole
    link: str  # Full redemption URL with token
    expires_at: datetime
    used_at: datetime | None
    single_use: bool
    created_at: datetime

    @classmethod
    def from_invite(cls, invite: Invite, settings: Settings) -> "InviteItem":
        return cls(
            invite_id=str(invite.id),
            resource_id=invite.resource_id.root,
            email=invite.email.root,
            role=invite.role,
            link=settings.invite_url(invite.token.root),
            expires_at=invite.expires_at,
            used_at=invite.used_at,
            single_use=invite.single_use,
            created_at=invite.created_at,
        )


class CreateInviteRequest(BaseModel):
    """Request to invite someone to an objective."""

    user_id: str  # Owner from authenticated user
    resource_id: str
    email: str
    role: str


class CreateInviteResponse(BaseModel):
    """Created invite token and its redemption URL."""

    token: str
    link: str
    invite: InviteItem


class CreateInviteUseCase(BaseUseCase):
    """Use case for creating an email-targeted invite.

    Delivering the link to the invitee is up to the caller.
    """

    def __init__(
        self,
        invite_service: InviteService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            objective_service: Objective domain service
            activity_service: Activity domain service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.objective_service = objective_service
        self.activity_service = activity_service
        self.settings = settings

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Execute create invite flow.

        Args:
            request: Create invite request

        Returns:
            Token, redemption URL and invite details

        Raises:
            ValidationError: If email, role or resource id is malformed
            NotFoundError: If the objective does not exist
            NotAuthorizedError: If the caller does not own the objective
        """
        resource_id = parse_resource_id(request.resource_id)
        parse_email(request.email)
        parse_role(request.role)
        user_id = UserId(request.user_id)

        with logfire.span("create_invite", resource_id=resource_id.root):
            await self.objective_service.require_owned(resource_id, user_id)

            invite = await self.invite_service.create_invite(
                resource_id=request.resource_id,
                email=request.email,
                role=request.role,
                invited_by=user_id,
            )

            await self.activity_service.record(
                resource_id,
                ActivityKind.INVITE,
                {"email": invite.email.root, "role": invite.role.value},
            )

            item = InviteItem.from_invite(invite, self.settings)
            return CreateInviteResponse(
                token=invite.token.root, link=item.link, invite=item
            )
