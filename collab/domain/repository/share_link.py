"""Share link repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model.share_link import ShareLink
from collab.domain.value import ResourceId, ShareLinkId, ShareRole, ShareToken


class ShareLinkRepository(ABC):
    """Repository for ShareLink entity.

    The authoritative store for link tokens. Implementations must enforce
    that at most one non-revoked link exists per (resource_id, role).
    """

    @abstractmethod
    async def find_by_id(self, link_id: ShareLinkId) -> ShareLink | None:
        """Find a link by ID.

        Args:
            link_id: The link's unique identifier

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: ShareToken) -> ShareLink | None:
        """Find a link by token.

        Used on every guest request, so must be fast.

        Args:
            token: The link token

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(
        self, resource_id: ResourceId, role: ShareRole
    ) -> ShareLink | None:
        """Find the non-revoked link for a resource and role.

        Expiry is not evaluated here; callers decide what an expired but
        non-revoked link means.

        Args:
            resource_id: The shared resource
            role: The granted role

        Returns:
            The non-revoked link if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_resource(self, resource_id: ResourceId) -> list[ShareLink]:
        """Find all links for a resource, newest first.

        Args:
            resource_id: The shared resource

        Returns:
            List of links, revoked ones included
        """
        pass

    @abstractmethod
    async def create(self, link: ShareLink) -> ShareLink:
        """Persist a new link.

        Args:
            link: The link to create

        Returns:
            The created link

        Raises:
            ActiveLinkConflictError: If a non-revoked link already exists
                for the same resource and role
        """
        pass

    @abstractmethod
    async def mark_revoked(self, link_id: ShareLinkId) -> ShareLink | None:
        """Set ``revoked`` on a link.

        Idempotent; never clears the flag.

        Args:
            link_id: The link to revoke

        Returns:
            The revoked link, None if it does not exist
        """
        pass
