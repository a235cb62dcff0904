"""Add collaborator use case."""

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.member.list_members import MemberItem
from collab.domain.service import MemberService, ObjectiveService
from collab.domain.service.base import parse_email, parse_resource_id, parse_role
from collab.domain.value import UserId


class AddMemberRequest(BaseModel):
    """Request to add a collaborator to an objective."""

    user_id: str  # Owner from authenticated user
    resource_id: str
    email: str
    role: str


class AddMemberResponse(BaseModel):
    """The stored collaborator."""

    member: MemberItem


class AddMemberUseCase(BaseUseCase):
    """Use case for adding a named collaborator.

    Adding an email that is already on the roster changes its role.
    Sending any notification to the member is up to the caller.
    """

    def __init__(
        self, member_service: MemberService, objective_service: ObjectiveService
    ) -> None:
        """Initialize use case.

        Args:
            member_service: Member domain service
            objective_service: Objective domain service
        """
        self.member_service = member_service
        self.objective_service = objective_service

    async def execute(self, request: AddMemberRequest) -> AddMemberResponse:
        """Execute add member flow.

        Raises:
            ValidationError: If email, role or resource id is malformed
            NotFoundError: If the objective does not exist
            NotAuthorizedError: If the caller does not own the objective
        """
        resource_id = parse_resource_id(request.resource_id)
        parse_email(request.email)
        parse_role(request.role)

        with logfire.span("add_member", resource_id=resource_id.root):
            await self.objective_service.require_owned(
                resource_id, UserId(request.user_id)
            )

            member = await self.member_service.add_member(
                resource_id, request.email, request.role
            )
            return AddMemberResponse(member=MemberItem.from_member(member))
