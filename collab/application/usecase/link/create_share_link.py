"""Create share link use case."""

from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel, Field

from collab.application.usecase.base import BaseUseCase
from collab.config import Settings
from collab.domain.model.share_link import ShareLink
from collab.domain.service import ActivityService, LinkService, ObjectiveService
from collab.domain.service.base import parse_resource_id, parse_role
from collab.domain.value import ActivityKind, ShareRole, UserId


class LinkItem(BaseModel):
    """Share link as shown to its owner."""

    link_id: str
    resource_id: str
    role: ShareRole
    token: str
    url: str
    revoked: bool
    expires_at: datetime | None
    created_at: datetime

    @classmethod
    def from_link(cls, link: ShareLink, settings: Settings) -> "LinkItem":
        return cls(
            link_id=str(link.id),
            resource_id=link.resource_id.root,
            role=link.role,
            token=link.token.root,
            url=settings.share_url(link.token.root),
            revoked=link.revoked,
            expires_at=link.expires_at,
            created_at=link.created_at,
        )


class CreateShareLinkRequest(BaseModel):
    """Request to get or create a share link."""

    user_id: str  # Owner from authenticated user
    resource_id: str
    role: str
    # None = no expiry
    expires_in_days: int | None = Field(default=None, ge=1, le=3650)


class CreateShareLinkResponse(BaseModel):
    """Share link and its public URL."""

    url: str
    link: LinkItem


class CreateShareLinkUseCase(BaseUseCase):
    """Use case for the owner's "copy share link" action.

    Repeated requests return the same link until it is revoked or expires.
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

    async def execute(self, request: CreateShareLinkRequest) -> CreateShareLinkResponse:
        """Execute create share link flow.

        Steps:
        1. Validate resource id and role
        2. Verify the caller owns the objective
        3. Get or create the link, recording activity if a new one was minted

        Raises:
            ValidationError: If resource id or role is malformed
            NotFoundError: If the objective does not exist
            NotAuthorizedError: If the caller does not own the objective
        """
        resource_id = parse_resource_id(request.resource_id)
        role = parse_role(request.role)
        user_id = UserId(request.user_id)

        with logfire.span(
            "create_share_link", resource_id=resource_id.root, role=role.value
        ):
            await self.objective_service.require_owned(resource_id, user_id)

            expires_in = None
            if request.expires_in_days is not None:
                expires_in = timedelta(days=request.expires_in_days)

            previous = await self.link_service.get_active_link(resource_id, role)
            link = await self.link_service.get_or_create_link(
                resource_id, role, created_by=user_id, expires_in=expires_in
            )

            if previous is None or previous.id != link.id:
                await self.activity_service.record(
                    resource_id, ActivityKind.LINK_CREATED, {"role": role.value}
                )

            item = LinkItem.from_link(link, self.settings)
            return CreateShareLinkResponse(url=item.url, link=item)
