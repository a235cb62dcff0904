"""Revoke share link use case."""

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.link.create_share_link import LinkItem
from collab.config import Settings
from collab.domain.error import NotFoundError, ValidationError
from collab.domain.model.share_link import ShareLink
from collab.domain.service import ActivityService, LinkService, ObjectiveService
from collab.domain.service.base import parse_resource_id, parse_role
from collab.domain.value import ActivityKind, ShareToken, UserId
from collab.util.observability import mask_token


class RevokeShareLinkRequest(BaseModel):
    """Request to revoke a link.

    Either ``token``, or ``resource_id`` together with ``role``.
    """

    user_id: str
    token: str | None = None
    resource_id: str | None = None
    role: str | None = None


class RevokeShareLinkResponse(BaseModel):
    """Revocation result."""

    ok: bool = True
    revoked: bool  # False when nothing was active
    link: LinkItem | None = None


class RevokeShareLinkUseCase(BaseUseCase):
    """Use case for revoking a share link.

    Both forms end up revoking the one active link of a (resource, role)
    pair; the next issuance for the pair mints a new token.
    """

    def __init__(
        self,
        link_service: LinkService,
        objective_service: ObjectiveService,
        activity_service: ActivityService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            link_service: Link domain service
            objective_service: Objective domain service
            activity_service: Activity domain service
            settings: Application settings
        """
        self.link_service = link_service
        self.objective_service = objective_service
        self.activity_service = activity_service
        self.settings = settings

    async def execute(self, request: RevokeShareLinkRequest) -> RevokeShareLinkResponse:
        """Execute revoke flow.

        Raises:
            ValidationError: If neither a token nor resource and role are given
            NotFoundError: If the token or objective is unknown
            NotAuthorizedError: If the caller does not own the objective
        """
        user_id = UserId(request.user_id)

        if request.token:
            return await self._revoke_by_token(request.token, user_id)

        if request.resource_id is None or request.role is None:
            raise ValidationError(
                "token", "Provide a token, or a resource id and a role"
            )

        resource_id = parse_resource_id(request.resource_id)
        role = parse_role(request.role)

        with logfire.span(
            "revoke_share_link", resource_id=resource_id.root, role=role.value
        ):
            await self.objective_service.require_owned(resource_id, user_id)
            revoked = await self.link_service.revoke_active(resource_id, role)
            if revoked is None:
                return RevokeShareLinkResponse(revoked=False)

            await self._record(revoked)
            return RevokeShareLinkResponse(
                revoked=True, link=LinkItem.from_link(revoked, self.settings)
            )

    async def _revoke_by_token(
        self, raw_token: str, user_id: UserId
    ) -> RevokeShareLinkResponse:
        with logfire.span("revoke_share_link", token=mask_token(raw_token)):
            token = ShareToken(raw_token)
            link = await self.link_service.get_link_by_token(token)
            if link is None:
                raise NotFoundError("ShareLink", mask_token(raw_token))

            await self.objective_service.require_owned(link.resource_id, user_id)

            was_revoked = link.revoked
            revoked = await self.link_service.revoke(token)
            if not was_revoked:
                await self._record(revoked)

            return RevokeShareLinkResponse(
                revoked=not was_revoked,
                link=LinkItem.from_link(revoked, self.settings),
            )

    async def _record(self, link: ShareLink) -> None:
        await self.activity_service.record(
            link.resource_id, ActivityKind.LINK_REVOKED, {"role": link.role.value}
        )
