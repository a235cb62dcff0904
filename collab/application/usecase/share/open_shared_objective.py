"""Open shared objective use case (guest visits a share URL)."""

from datetime import date, datetime

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.domain.error import InvalidTokenError, ValidationError
from collab.domain.model.comment import Comment
from collab.domain.model.objective import Objective
from collab.domain.service import CommentService, ObjectiveService, RedemptionService
from collab.domain.service.base import parse_email, parse_token
from collab.domain.value import (
    GuestAction,
    ObjectivePriority,
    ObjectiveStatus,
    ShareRole,
)


class ObjectiveView(BaseModel):
    """Objective as rendered to a guest. The owner id is not exposed."""

    id: str
    title: str
    description: str | None
    status: ObjectiveStatus
    priority: ObjectivePriority
    completion_percentage: int
    target_date: date | None
    updated_at: datetime

    @classmethod
    def from_objective(cls, objective: Objective) -> "ObjectiveView":
        return cls(
            id=objective.id.root,
            title=objective.title,
            description=objective.description,
            status=objective.status,
            priority=objective.priority,
            completion_percentage=objective.completion_percentage,
            target_date=objective.target_date,
            updated_at=objective.updated_at,
        )


class CommentItem(BaseModel):
    """Comment in a shared objective's discussion."""

    comment_id: str
    author: str
    body: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            author=comment.author_email,
            body=comment.body,
            created_at=comment.created_at,
        )


class OpenSharedObjectiveRequest(BaseModel):
    """Guest request carrying the token from the URL."""

    token: str
    # Set when the guest identified themselves; dropped if malformed
    email: str | None = None


class OpenSharedObjectiveResponse(BaseModel):
    """The objective at the role the link grants."""

    role: ShareRole
    can_comment: bool
    can_edit: bool
    objective: ObjectiveView
    comments: list[CommentItem]


class OpenSharedObjectiveUseCase(BaseUseCase):
    """Use case for rendering a shared objective to a link holder."""

    def __init__(
        self,
        redemption_service: RedemptionService,
        objective_service: ObjectiveService,
        comment_service: CommentService,
    ) -> None:
        """Initialize use case.

        Args:
            redemption_service: Redemption domain service
            objective_service: Objective domain service
            comment_service: Comment domain service
        """
        self.redemption_service = redemption_service
        self.objective_service = objective_service
        self.comment_service = comment_service

    async def execute(
        self, request: OpenSharedObjectiveRequest
    ) -> OpenSharedObjectiveResponse:
        """Execute open flow.

        Steps:
        1. Resolve the token (records an access entry)
        2. Load the objective and its comments

        Raises:
            AccessDeniedError: If the token is unknown, revoked or expired
        """
        token = parse_token(request.token)

        with logfire.span("open_shared_objective"):
            email = None
            if request.email:
                try:
                    email = parse_email(request.email).root
                except ValidationError:
                    logfire.info("Recording access without malformed guest email")

            link = await self.redemption_service.resolve(token, email)

            objective = await self.objective_service.get_objective(link.resource_id)
            if objective is None:
                # Link outlived its objective; indistinguishable from a bad token
                raise InvalidTokenError()

            comments = await self.comment_service.list_comments(link.resource_id)

            return OpenSharedObjectiveResponse(
                role=link.role,
                can_comment=link.role.allows(GuestAction.COMMENT),
                can_edit=link.role.allows(GuestAction.EDIT),
                objective=ObjectiveView.from_objective(objective),
                comments=[CommentItem.from_comment(c) for c in comments],
            )
