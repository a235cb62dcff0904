"""List share links use case."""

from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.link.create_share_link import LinkItem
from collab.config import Settings
from collab.domain.service import LinkService, ObjectiveService
from collab.domain.service.base import parse_resource_id
from collab.domain.value import UserId


class ListShareLinksRequest(BaseModel):
    """Request to list the links of an objective."""

    user_id: str
    resource_id: str


class ListShareLinksResponse(BaseModel):
    """All links ever issued for the objective, newest first."""

    links: list[LinkItem]
    total: int


class ListShareLinksUseCase(BaseUseCase):
    """Use case for listing an owner's share links."""

    def __init__(
        self,
        link_service: LinkService,
        objective_service: ObjectiveService,
        settings: Settings,
    ) -> None:
        self.link_service = link_service
        self.objective_service = objective_service
        self.settings = settings

    async def execute(self, request: ListShareLinksRequest) -> ListShareLinksResponse:
        """Execute list share links flow."""
        resource_id = parse_resource_id(request.resource_id)
        await self.objective_service.require_owned(
            resource_id, UserId(request.user_id)
        )

        links = await self.link_service.list_links(resource_id)
        items = [LinkItem.from_link(link, self.settings) for link in links]
        return ListShareLinksResponse(links=items, total=len(items))
