"""In-memory share link repository for testing."""

from typing import Optional

from collab.domain.error import ActiveLinkConflictError
from collab.domain.model.share_link import ShareLink
from collab.domain.repository.share_link import ShareLinkRepository
from collab.domain.value import ResourceId, ShareLinkId, ShareRole, ShareToken


class InMemoryShareLinkRepository(ShareLinkRepository):
    """In-memory implementation of ShareLinkRepository for testing.

    ``create`` checks and inserts without yielding to the event loop, which
    gives it the same all-or-nothing behavior as the partial unique index.
    """

    def __init__(self) -> None:
        self._links: dict[ShareLinkId, ShareLink] = {}

    async def find_by_id(self, link_id: ShareLinkId) -> Optional[ShareLink]:
        """Find a link by ID."""
        return self._links.get(link_id)

    async def find_by_token(self, token: ShareToken) -> Optional[ShareLink]:
        """Find a link by its token."""
        for link in self._links.values():
            if link.token == token:
                return link
        return None

    async def find_active(
        self, resource_id: ResourceId, role: ShareRole
    ) -> Optional[ShareLink]:
        """Find the non-revoked link for a resource and role."""
        return self._find_active(resource_id, role)

    async def find_by_resource(self, resource_id: ResourceId) -> list[ShareLink]:
        """Find all links for a resource, newest first."""
        links = [
            link for link in self._links.values() if link.resource_id == resource_id
        ]
        links.sort(key=lambda link: link.created_at, reverse=True)
        return links

    async def create(self, link: ShareLink) -> ShareLink:
        """Insert a link unless an active one exists for the pair."""
        if self._find_active(link.resource_id, link.role) is not None:
            raise ActiveLinkConflictError(link.resource_id.root, link.role.value)
        self._links[link.id] = link
        return link

    async def mark_revoked(self, link_id: ShareLinkId) -> Optional[ShareLink]:
        """Set ``revoked`` on a link."""
        link = self._links.get(link_id)
        if link is None:
            return None
        revoked = link.model_copy(update={"revoked": True})
        self._links[link_id] = revoked
        return revoked

    def _find_active(
        self, resource_id: ResourceId, role: ShareRole
    ) -> Optional[ShareLink]:
        for link in self._links.values():
            if (
                link.resource_id == resource_id
                and link.role == role
                and not link.revoked
            ):
                return link
        return None
