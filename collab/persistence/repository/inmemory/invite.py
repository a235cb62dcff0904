"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from collab.domain.model.invite import Invite
from collab.domain.repository.invite import InviteRepository
from collab.domain.value import InviteId, ResourceId, ShareToken


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: list[Invite] = []

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        for invite in self._invites:
            if invite.id == invite_id:
                return invite
        return None

    async def find_by_token(self, token: ShareToken) -> Optional[Invite]:
        """Find an invite by its token."""
        for invite in self._invites:
            if invite.token == token:
                return invite
        return None

    async def find_by_resource(
        self, resource_id: ResourceId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """Find invites for a resource with pagination."""
        matches = [inv for inv in self._invites if inv.resource_id == resource_id]

        # Sort by created_at descending
        matches.sort(key=lambda inv: inv.created_at, reverse=True)

        # Apply pagination
        return matches[offset : offset + limit]

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update)."""
        for i, existing in enumerate(self._invites):
            if existing.id == invite.id:
                self._invites[i] = invite
                return invite

        self._invites.append(invite)
        return invite

    async def mark_used(
        self, invite_id: InviteId, used_at: datetime
    ) -> Optional[Invite]:
        """Set ``used_at`` if it is still unset."""
        for i, existing in enumerate(self._invites):
            if existing.id == invite_id:
                if existing.used_at is not None:
                    return None
                used = existing.model_copy(update={"used_at": used_at})
                self._invites[i] = used
                return used
        return None
