"""Collaborator roster domain service."""

from uuid import uuid4

import logfire

from collab.domain.model.member import CollabMember
from collab.domain.repository import MemberRepository
from collab.domain.value import ActivityKind, MemberId, ResourceId
from collab.util.clock import Clock, utc_now

from .activity_service import ActivityService
from .base import Service, parse_email, parse_role


class MemberService(Service):
    """Domain service for an objective's named collaborators.

    Like ``LinkService`` this does not authorize: callers must have checked
    that the acting user owns the objective.
    """

    def __init__(
        self,
        member_repository: MemberRepository,
        activity_service: ActivityService,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize member service.

        Args:
            member_repository: Collaborator roster repository
            activity_service: Activity feed, written on every add
            clock: Time source for ``joined_at``
        """
        self.member_repository = member_repository
        self.activity_service = activity_service
        self.clock = clock

    async def list_members(self, resource_id: ResourceId) -> list[CollabMember]:
        """List members, earliest joined first."""
        with logfire.span("member_service.list_members", resource_id=resource_id.root):
            return await self.member_repository.find_by_resource(resource_id)

    async def add_member(
        self, resource_id: ResourceId, email: str, role: str
    ) -> CollabMember:
        """Add a collaborator, or change the role of an existing one.

        Every call appends an ``invite`` entry to the activity feed.

        Args:
            resource_id: Objective to add the member to
            email: Member email
            role: "viewer" or "editor"

        Returns:
            The stored member

        Raises:
            ValidationError: If the email or role is malformed
        """
        parsed_email = parse_email(email)
        parsed_role = parse_role(role)

        with logfire.span(
            "member_service.add_member",
            resource_id=resource_id.root,
            role=parsed_role.value,
        ):
            member = await self.member_repository.upsert(
                CollabMember(
                    id=MemberId(uuid4()),
                    resource_id=resource_id,
                    email=parsed_email,
                    role=parsed_role,
                    joined_at=self.clock(),
                )
            )

            await self.activity_service.record(
                resource_id,
                ActivityKind.INVITE,
                {"email": member.email.root, "role": member.role.value},
            )
            logfire.info(
                "Member added",
                member_id=str(member.id),
                resource_id=resource_id.root,
                role=member.role.value,
            )
            return member

    async def remove_member(self, resource_id: ResourceId, email: str) -> bool:
        """Remove a collaborator by email.

        Returns:
            True if a member was removed, False if there was none

        Raises:
            ValidationError: If the email is malformed
        """
        parsed_email = parse_email(email)

        with logfire.span("member_service.remove_member", resource_id=resource_id.root):
            removed = await self.member_repository.remove(resource_id, parsed_email)
            if removed:
                logfire.info("Member removed", resource_id=resource_id.root)
            return removed
