"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from collab.domain.model.invite import Invite
from collab.domain.value import InviteId, ResourceId, ShareToken


class InviteRepository(ABC):
    """Repository for Invite entity."""

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: ShareToken) -> Invite | None:
        """Find an invite by token.

        Used when a guest redeems an invite link.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_resource(
        self, resource_id: ResourceId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """Find invites for a resource with pagination, newest first.

        Args:
            resource_id: The shared resource
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save a new invite.

        Args:
            invite: The invite to save

        Returns:
            The saved invite
        """
        pass

    @abstractmethod
    async def mark_used(self, invite_id: InviteId, used_at: datetime) -> Invite | None:
        """Set ``used_at`` if it is still unset.

        The check and the write are one atomic step, so two concurrent
        redemptions of a single-use invite cannot both succeed.

        Args:
            invite_id: The invite to mark
            used_at: Redemption timestamp

        Returns:
            The updated invite, None if it was already used or is unknown
        """
        pass
