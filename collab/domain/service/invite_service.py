"""Invite domain service."""

from datetime import timedelta
from uuid import uuid4

import logfire

from collab.config import SharingSettings
from collab.domain.error import (
    InvalidTokenError,
    InviteAlreadyUsedError,
    RoleMismatchError,
    TokenExpiredError,
)
from collab.domain.model.invite import Invite
from collab.domain.repository import InviteRepository
from collab.domain.value import GuestAction, InviteId, ResourceId, ShareToken, UserId
from collab.util.clock import Clock, utc_now
from collab.util.observability import mask_token
from collab.util.token import generate_token

from .base import Service, parse_email, parse_resource_id, parse_role


class InviteService(Service):
    """Domain service for email-targeted invites.

    Redemption policy comes from ``SharingSettings.invite_single_use`` at
    creation time and is stored on each invite: single-use invites are
    consumed by their first redemption, the others stay valid until they
    expire.
    """

    def __init__(
        self,
        invite_repository: InviteRepository,
        sharing_settings: SharingSettings,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            sharing_settings: Token length, expiry and single-use policy
            clock: Time source for expiry checks
        """
        self.invite_repository = invite_repository
        self.sharing_settings = sharing_settings
        self.clock = clock

    async def create_invite(
        self,
        resource_id: str,
        email: str,
        role: str,
        invited_by: UserId | None = None,
    ) -> Invite:
        """Create a new invite.

        Args:
            resource_id: Resource the invite grants access to
            email: Invitee email address
            role: "viewer" or "editor"
            invited_by: Owner creating the invite

        Returns:
            Created invite

        Raises:
            ValidationError: If the email, role or resource id is malformed
        """
        parsed_resource_id = parse_resource_id(resource_id)
        parsed_email = parse_email(email)
        parsed_role = parse_role(role)

        with logfire.span(
            "invite_service.create_invite",
            resource_id=parsed_resource_id.root,
            role=parsed_role.value,
        ):
            now = self.clock()
            invite = Invite(
                id=InviteId(uuid4()),
                resource_id=parsed_resource_id,
                email=parsed_email,
                role=parsed_role,
                token=ShareToken(generate_token(self.sharing_settings.token_length)),
                expires_at=now
                + timedelta(days=self.sharing_settings.invite_expiry_days),
                used_at=None,
                single_use=self.sharing_settings.invite_single_use,
                created_at=now,
                invited_by=invited_by,
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                resource_id=parsed_resource_id.root,
                role=parsed_role.value,
                single_use=saved.single_use,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def redeem(
        self,
        token: ShareToken,
        action: GuestAction,
        resource_id: ResourceId | None = None,
    ) -> Invite:
        """Validate an invite for a guest action and consume it if single-use.

        Checks run in order: unknown token, resource mismatch, already used,
        expired, role. The caller applies the action only after this
        returns.

        Args:
            token: Invite token
            action: Action the guest wants to perform
            resource_id: Resource the guest is acting on, if stated

        Returns:
            The invite (with ``used_at`` set if it was single-use)

        Raises:
            InvalidTokenError: If the token is unknown or for another resource
            InviteAlreadyUsedError: If a single-use invite was already redeemed
            TokenExpiredError: If the invite is past its expiry
            RoleMismatchError: If the invite's role does not grant ``action``
        """
        with logfire.span(
            "invite_service.redeem",
            token=mask_token(token.root),
            action=action.value,
        ):
            invite = await self.invite_repository.find_by_token(token)

            if invite is None:
                logfire.warn(
                    "Invite rejected", reason="not_found", token=mask_token(token.root)
                )
                raise InvalidTokenError()

            if resource_id is not None and invite.resource_id != resource_id:
                logfire.warn(
                    "Invite rejected",
                    reason="resource_mismatch",
                    invite_id=str(invite.id),
                )
                raise InvalidTokenError()

            if invite.single_use and invite.used_at is not None:
                logfire.warn("Invite rejected", reason="used", invite_id=str(invite.id))
                raise InviteAlreadyUsedError()

            now = self.clock()
            if invite.is_expired(now):
                logfire.warn(
                    "Invite rejected", reason="expired", invite_id=str(invite.id)
                )
                raise TokenExpiredError()

            if not invite.role.allows(action):
                logfire.warn(
                    "Invite rejected",
                    reason="role_mismatch",
                    invite_id=str(invite.id),
                    role=invite.role.value,
                    action=action.value,
                )
                raise RoleMismatchError(invite.role.value, action.value)

            if invite.single_use:
                consumed = await self.invite_repository.mark_used(invite.id, now)
                if consumed is None:
                    # A concurrent redemption consumed it first
                    logfire.warn(
                        "Invite rejected", reason="used", invite_id=str(invite.id)
                    )
                    raise InviteAlreadyUsedError()
                invite = consumed

            logfire.info(
                "Invite redeemed",
                invite_id=str(invite.id),
                resource_id=invite.resource_id.root,
                action=action.value,
            )
            return invite

    async def get_invite_by_token(self, token: ShareToken) -> Invite | None:
        """Get invite by token without any status checks."""
        with logfire.span(
            "invite_service.get_invite_by_token", token=mask_token(token.root)
        ):
            return await self.invite_repository.find_by_token(token)

    async def list_invites(
        self, resource_id: ResourceId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites created for a resource.

        Args:
            resource_id: Shared resource
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites, newest first
        """
        with logfire.span(
            "invite_service.list_invites",
            resource_id=resource_id.root,
            limit=limit,
            offset=offset,
        ):
            invites = await self.invite_repository.find_by_resource(
                resource_id, limit, offset
            )
            logfire.info(
                "Invites listed", resource_id=resource_id.root, count=len(invites)
            )
            return invites
