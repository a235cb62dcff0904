"""Redemption domain service (guest-side token validation)."""

from uuid import uuid4

import logfire

from collab.domain.error import (
    InvalidTokenError,
    LinkRevokedError,
    RoleMismatchError,
    TokenExpiredError,
)
from collab.domain.model.access_record import AccessRecord
from collab.domain.model.share_link import ShareLink
from collab.domain.repository import AccessRecordRepository, ShareLinkRepository
from collab.domain.value import AccessRecordId, GuestAction, ShareLinkId, ShareToken
from collab.util.clock import Clock, utc_now
from collab.util.observability import mask_token

from .base import Service


class RedemptionService(Service):
    """Validates share link tokens presented by guests.

    Every guest write calls ``authorize`` right before it is applied, so a
    link revoked after the page was opened blocks later actions.
    """

    def __init__(
        self,
        link_repository: ShareLinkRepository,
        access_record_repository: AccessRecordRepository,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize redemption service.

        Args:
            link_repository: Share link repository
            access_record_repository: Access audit trail
            clock: Time source for expiry checks
        """
        self.link_repository = link_repository
        self.access_record_repository = access_record_repository
        self.clock = clock

    async def resolve(self, token: ShareToken, email: str | None = None) -> ShareLink:
        """Resolve a token to its link and record the access.

        Checks run in order and the first failure wins: unknown token,
        revoked, expired.

        Args:
            token: Token from the share URL
            email: Guest email if known (None for anonymous)

        Returns:
            The link, carrying resource_id and role

        Raises:
            InvalidTokenError: If no link has this token
            LinkRevokedError: If the link was revoked
            TokenExpiredError: If the link is past its expiry
        """
        with logfire.span("redemption_service.resolve", token=mask_token(token.root)):
            link = await self._check(token)

            record = AccessRecord(
                id=AccessRecordId(uuid4()),
                link_id=link.id,
                email=email,
                accessed_at=self.clock(),
            )
            await self.access_record_repository.append(record)

            logfire.info(
                "Share link resolved",
                link_id=str(link.id),
                resource_id=link.resource_id.root,
                role=link.role.value,
                anonymous=email is None,
            )
            return link

    async def authorize(self, token: ShareToken, action: GuestAction) -> ShareLink:
        """Re-validate a token immediately before a guest action.

        Args:
            token: Token from the share URL
            action: Action about to be applied

        Returns:
            The link if the action is allowed

        Raises:
            InvalidTokenError: If no link has this token
            LinkRevokedError: If the link was revoked
            TokenExpiredError: If the link is past its expiry
            RoleMismatchError: If the link's role does not grant ``action``
        """
        with logfire.span(
            "redemption_service.authorize",
            token=mask_token(token.root),
            action=action.value,
        ):
            link = await self._check(token)

            if not link.role.allows(action):
                logfire.warn(
                    "Guest action rejected by role",
                    link_id=str(link.id),
                    role=link.role.value,
                    action=action.value,
                )
                raise RoleMismatchError(link.role.value, action.value)

            return link

    async def list_access(
        self, link_id: ShareLinkId, limit: int = 100
    ) -> list[AccessRecord]:
        """List the access trail of a link, newest first."""
        with logfire.span("redemption_service.list_access", link_id=str(link_id)):
            return await self.access_record_repository.find_by_link(link_id, limit)

    async def _check(self, token: ShareToken) -> ShareLink:
        link = await self.link_repository.find_by_token(token)

        if link is None:
            logfire.warn(
                "Share token rejected", reason="not_found", token=mask_token(token.root)
            )
            raise InvalidTokenError()

        if link.revoked:
            logfire.warn("Share token rejected", reason="revoked", link_id=str(link.id))
            raise LinkRevokedError()

        if link.is_expired(self.clock()):
            logfire.warn("Share token rejected", reason="expired", link_id=str(link.id))
            raise TokenExpiredError()

        return link
