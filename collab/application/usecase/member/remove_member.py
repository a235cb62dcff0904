"""Remove collaborator use case."""

from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.domain.service import MemberService, ObjectiveService
from collab.domain.service.base import parse_resource_id
from collab.domain.value import UserId


class RemoveMemberRequest(BaseModel):
    """Request to remove a collaborator by email."""

    user_id: str
    resource_id: str
    email: str


class RemoveMemberResponse(BaseModel):
    """``removed`` is False when the email was not on the roster."""

    ok: bool = True
    removed: bool


class RemoveMemberUseCase(BaseUseCase):
    """Use case for taking a collaborator off an objective's roster.

    Removing a member does not revoke links or invites they already hold.
    """

    def __init__(
        self, member_service: MemberService, objective_service: ObjectiveService
    ) -> None:
        self.member_service = member_service
        self.objective_service = objective_service

    async def execute(self, request: RemoveMemberRequest) -> RemoveMemberResponse:
        resource_id = parse_resource_id(request.resource_id)
        await self.objective_service.require_owned(
            resource_id, UserId(request.user_id)
        )

        removed = await self.member_service.remove_member(resource_id, request.email)
        return RemoveMemberResponse(removed=removed)
