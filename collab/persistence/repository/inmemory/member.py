"""In-memory collaborator roster repository for testing."""

from typing import Optional

from collab.domain.model.member import CollabMember
from collab.domain.repository.member import MemberRepository
from collab.domain.value import Email, ResourceId


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self) -> None:
        self._members: list[CollabMember] = []

    async def find_by_resource(self, resource_id: ResourceId) -> list[CollabMember]:
        """Find the members of a resource, earliest joined first."""
        matches = [m for m in self._members if m.resource_id == resource_id]
        matches.sort(key=lambda m: (m.joined_at, m.email.root))
        return matches

    async def find_by_email(
        self, resource_id: ResourceId, email: Email
    ) -> Optional[CollabMember]:
        """Find one member by email."""
        for member in self._members:
            if member.resource_id == resource_id and member.email == email:
                return member
        return None

    async def upsert(self, member: CollabMember) -> CollabMember:
        """Add a member, or update the role of the existing entry."""
        for i, existing in enumerate(self._members):
            if (
                existing.resource_id == member.resource_id
                and existing.email == member.email
            ):
                updated = existing.model_copy(update={"role": member.role})
                self._members[i] = updated
                return updated

        self._members.append(member)
        return member

    async def remove(self, resource_id: ResourceId, email: Email) -> bool:
        """Remove a member if present."""
        before = len(self._members)
        self._members = [
            m
            for m in self._members
            if not (m.resource_id == resource_id and m.email == email)
        ]
        return len(self._members) < before
