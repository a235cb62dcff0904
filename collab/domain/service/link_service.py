"""Share link domain service (issuance and revocation)."""

from datetime import timedelta
from uuid import uuid4

import logfire

from collab.config import SharingSettings
from collab.domain.error import ActiveLinkConflictError, NotFoundError, StorageError
from collab.domain.model.share_link import ShareLink
from collab.domain.repository import ShareLinkRepository
from collab.domain.value import ResourceId, ShareLinkId, ShareRole, ShareToken, UserId
from collab.util.clock import Clock, utc_now
from collab.util.observability import mask_token
from collab.util.token import generate_token

from .base import Service


class LinkService(Service):
    """Domain service for minting, reusing and revoking share links.

    This service does not authorize: callers must have checked that the
    acting user may share the resource.
    """

    def __init__(
        self,
        link_repository: ShareLinkRepository,
        sharing_settings: SharingSettings,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize link service.

        Args:
            link_repository: Share link repository
            sharing_settings: Token length configuration
            clock: Time source for expiry checks
        """
        self.link_repository = link_repository
        self.sharing_settings = sharing_settings
        self.clock = clock

    async def get_or_create_link(
        self,
        resource_id: ResourceId,
        role: ShareRole,
        created_by: UserId | None = None,
        expires_in: timedelta | None = None,
    ) -> ShareLink:
        """Return the active link for (resource, role), minting one if needed.

        Repeated calls return the same link unchanged. A non-revoked link
        that has expired is revoked first so a fresh one can be issued.
        If a concurrent caller inserts first, its link is returned.

        Args:
            resource_id: Resource to share
            role: Role granted by the link
            created_by: Owner minting the link
            expires_in: Lifetime of a newly minted link (None for no expiry)

        Returns:
            The canonical active link

        Raises:
            StorageError: If the store fails or the race winner vanished
        """
        with logfire.span(
            "link_service.get_or_create_link",
            resource_id=resource_id.root,
            role=role.value,
        ):
            existing = await self.link_repository.find_active(resource_id, role)

            if existing and existing.is_expired(self.clock()):
                logfire.info(
                    "Retiring expired link",
                    link_id=str(existing.id),
                    resource_id=resource_id.root,
                    role=role.value,
                )
                await self.link_repository.mark_revoked(existing.id)
                existing = None

            if existing:
                logfire.info(
                    "Reusing active link",
                    link_id=str(existing.id),
                    resource_id=resource_id.root,
                    role=role.value,
                )
                return existing

            now = self.clock()
            link = ShareLink(
                id=ShareLinkId(uuid4()),
                resource_id=resource_id,
                role=role,
                token=ShareToken(generate_token(self.sharing_settings.token_length)),
                revoked=False,
                expires_at=now + expires_in if expires_in else None,
                created_at=now,
                created_by=created_by,
            )

            try:
                saved = await self.link_repository.create(link)
            except ActiveLinkConflictError:
                # Lost the race: converge on the row that won
                winner = await self.link_repository.find_active(resource_id, role)
                if winner is None:
                    logfire.error(
                        "Active link vanished after conflict",
                        resource_id=resource_id.root,
                        role=role.value,
                    )
                    raise StorageError(
                        f"Could not settle active {role.value} link for {resource_id}"
                    )
                logfire.info(
                    "Concurrent issuance resolved to existing link",
                    link_id=str(winner.id),
                    resource_id=resource_id.root,
                    role=role.value,
                )
                return winner

            logfire.info(
                "Share link created",
                link_id=str(saved.id),
                resource_id=resource_id.root,
                role=role.value,
                token=mask_token(saved.token.root),
            )
            return saved

    async def revoke(self, token: ShareToken) -> ShareLink:
        """Revoke the link holding ``token``.

        Revoking an already revoked link is a no-op.

        Args:
            token: Link token

        Returns:
            The revoked link

        Raises:
            NotFoundError: If no link has this token
        """
        with logfire.span("link_service.revoke", token=mask_token(token.root)):
            link = await self.link_repository.find_by_token(token)
            if not link:
                logfire.warn("Revoke of unknown token", token=mask_token(token.root))
                raise NotFoundError("ShareLink", mask_token(token.root))

            if link.revoked:
                logfire.info("Link already revoked", link_id=str(link.id))
                return link

            return await self._revoke(link)

    async def revoke_active(
        self, resource_id: ResourceId, role: ShareRole
    ) -> ShareLink | None:
        """Revoke the active link for (resource, role), if there is one.

        The next ``get_or_create_link`` for the pair mints a fresh token.

        Args:
            resource_id: Shared resource
            role: Role of the link to revoke

        Returns:
            The revoked link, None if nothing was active
        """
        with logfire.span(
            "link_service.revoke_active",
            resource_id=resource_id.root,
            role=role.value,
        ):
            link = await self.link_repository.find_active(resource_id, role)
            if not link:
                logfire.info(
                    "No active link to revoke",
                    resource_id=resource_id.root,
                    role=role.value,
                )
                return None
            return await self._revoke(link)

    async def get_active_link(
        self, resource_id: ResourceId, role: ShareRole
    ) -> ShareLink | None:
        """Return the currently redeemable link for (resource, role), if any."""
        link = await self.link_repository.find_active(resource_id, role)
        if link and link.is_active(self.clock()):
            return link
        return None

    async def get_link_by_token(self, token: ShareToken) -> ShareLink | None:
        """Look up a link by token without any status checks."""
        return await self.link_repository.find_by_token(token)

    async def get_link_by_id(self, link_id: ShareLinkId) -> ShareLink | None:
        """Look up a link by id."""
        return await self.link_repository.find_by_id(link_id)

    async def list_links(self, resource_id: ResourceId) -> list[ShareLink]:
        """List every link ever issued for a resource, newest first."""
        with logfire.span("link_service.list_links", resource_id=resource_id.root):
            links = await self.link_repository.find_by_resource(resource_id)
            logfire.info(
                "Links listed", resource_id=resource_id.root, count=len(links)
            )
            return links

    async def _revoke(self, link: ShareLink) -> ShareLink:
        revoked = await self.link_repository.mark_revoked(link.id)
        if revoked is None:
            raise NotFoundError("ShareLink", str(link.id))
        logfire.info(
            "Share link revoked",
            link_id=str(link.id),
            resource_id=link.resource_id.root,
            role=link.role.value,
        )
        return revoked
