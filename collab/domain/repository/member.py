"""Collaborator roster repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from collab.domain.model.member import CollabMember
from collab.domain.value import Email, ResourceId


class MemberRepository(ABC):
    """Repository for CollabMember entity."""

    @abstractmethod
    async def find_by_resource(self, resource_id: ResourceId) -> list[CollabMember]:
        """Find the members of an objective, earliest joined first.

        Args:
            resource_id: Objective ID

        Returns:
            List of members
        """
        pass

    @abstractmethod
    async def find_by_email(
        self, resource_id: ResourceId, email: Email
    ) -> Optional[CollabMember]:
        """Find one member of an objective by email.

        Args:
            resource_id: Objective ID
            email: Member email

        Returns:
            Member if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, member: CollabMember) -> CollabMember:
        """Add a member, or update the role of an existing (objective, email).

        Args:
            member: Member to add

        Returns:
            The stored member. On update this keeps the original id and
            ``joined_at``.
        """
        pass

    @abstractmethod
    async def remove(self, resource_id: ResourceId, email: Email) -> bool:
        """Remove a member.

        Args:
            resource_id: Objective ID
            email: Member email

        Returns:
            True if a member was removed
        """
        pass
