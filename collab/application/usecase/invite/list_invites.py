"""List invites use case."""

from pydantic import BaseModel, Field

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.invite.create_invite import InviteItem
from collab.config import Settings
from collab.domain.service import InviteService, ObjectiveService
from collab.domain.service.base import parse_resource_id
from collab.domain.value import UserId


class ListInvitesRequest(BaseModel):
    """Request to list invites for an objective."""

    user_id: str
    resource_id: str
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListInvitesResponse(BaseModel):
    """Invites, newest first."""

    invites: list[InviteItem]
    total: int


class ListInvitesUseCase(BaseUseCase):
    """Use case for listing the invites of an owned objective."""

    def __init__(
        self,
        invite_service: InviteService,
        objective_service: ObjectiveService,
        settings: Settings,
    ) -> None:
        """Initialize list invites use case.

        Args:
            invite_service: Invite service
            objective_service: Objective service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.objective_service = objective_service
        self.settings = settings

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """Execute list invites flow."""
        resource_id = parse_resource_id(request.resource_id)
        await self.objective_service.require_owned(
            resource_id, UserId(request.user_id)
        )

        invites = await self.invite_service.list_invites(
            resource_id, limit=request.limit, offset=request.offset
        )
        items = [InviteItem.from_invite(invite, self.settings) for invite in invites]
        return ListInvitesResponse(invites=items, total=len(items))
