"""List collaborators use case."""

from datetime import datetime

from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.domain.model.member import CollabMember
from collab.domain.service import MemberService, ObjectiveService
from collab.domain.service.base import parse_resource_id
from collab.domain.value import ShareRole, UserId


class MemberItem(BaseModel):
    """Collaborator as shown to the objective's owner."""

    member_id: str
    email: str
    role: ShareRole
    joined_at: datetime

    @classmethod
    def from_member(cls, member: CollabMember) -> "MemberItem":
        return cls(
            member_id=str(member.id),
            email=member.email.root,
            role=member.role,
            joined_at=member.joined_at,
        )


class ListMembersRequest(BaseModel):
    """Request for an objective's collaborators."""

    user_id: str
    resource_id: str


class ListMembersResponse(BaseModel):
    """Collaborators, earliest joined first."""

    members: list[MemberItem]


class ListMembersUseCase(BaseUseCase):
    """Use case for the owner's collaborator list."""

    def __init__(
        self, member_service: MemberService, objective_service: ObjectiveService
    ) -> None:
        self.member_service = member_service
        self.objective_service = objective_service

    async def execute(self, request: ListMembersRequest) -> ListMembersResponse:
        resource_id = parse_resource_id(request.resource_id)
        await self.objective_service.require_owned(
            resource_id, UserId(request.user_id)
        )

        members = await self.member_service.list_members(resource_id)
        return ListMembersResponse(
            members=[MemberItem.from_member(m) for m in members]
        )
