"""List link access use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.domain.error import NotFoundError
from collab.domain.service import LinkService, ObjectiveService, RedemptionService
from collab.domain.service.base import parse_resource_id
from collab.domain.value import ShareLinkId, UserId


class AccessItem(BaseModel):
    """One recorded redemption."""

    email: str | None
    accessed_at: datetime


class ListLinkAccessRequest(BaseModel):
    """Request for the access trail of one link."""

    user_id: str
    resource_id: str
    link_id: UUID
    limit: int = 100


class ListLinkAccessResponse(BaseModel):
    """Access trail, newest first."""

    link_id: str
    records: list[AccessItem]


class ListLinkAccessUseCase(BaseUseCase):
    """Use case for showing an owner who opened a link."""

    def __init__(
        self,
        link_service: LinkService,
        redemption_service: RedemptionService,
        objective_service: ObjectiveService,
    ) -> None:
        self.link_service = link_service
        self.redemption_service = redemption_service
        self.objective_service = objective_service

    async def execute(self, request: ListLinkAccessRequest) -> ListLinkAccessResponse:
        """Execute list access flow.

        Raises:
            NotFoundError: If the link is unknown or belongs to another objective
            NotAuthorizedError: If the caller does not own the objective
        """
        resource_id = parse_resource_id(request.resource_id)
        await self.objective_service.require_owned(
            resource_id, UserId(request.user_id)
        )

        link_id = ShareLinkId(request.link_id)
        link = await self.link_service.get_link_by_id(link_id)
        if link is None or link.resource_id != resource_id:
            raise NotFoundError("ShareLink", str(request.link_id))

        records = await self.redemption_service.list_access(link_id, request.limit)
        return ListLinkAccessResponse(
            link_id=str(link_id),
            records=[
                AccessItem(email=r.email, accessed_at=r.accessed_at) for r in records
            ],
        )
