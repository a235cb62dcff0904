"""Post a guest comment through a share link."""

import logfire
from pydantic import BaseModel

from collab.application.usecase.base import BaseUseCase
from collab.application.usecase.share.open_shared_objective import CommentItem
from collab.domain.service import ActivityService, CommentService, RedemptionService
from collab.domain.service.base import parse_email, parse_token
from collab.domain.service.comment_service import normalize_comment_body
from collab.domain.value import ActivityKind, GuestAction


class PostLinkCommentRequest(BaseModel):
    """Guest comment request."""

    token: str
    body: str
    email: str | None = None  # Optional self-declared guest email


class PostLinkCommentResponse(BaseModel):
    """Created comment."""

    comment: CommentItem


class PostLinkCommentUseCase(BaseUseCase):
    """Use case for a link holder posting a comment.

    The token is re-validated right before the write, so a link revoked
    after the page was loaded can not be used to comment.
    """

    def __init__(
        self,
        redemption_service: RedemptionService,
        comment_service: CommentService,
        activity_service: ActivityService,
    ) -> None:
        self.redemption_service = redemption_service
        self.comment_service = comment_service
        self.activity_service = activity_service

    async def execute(self, request: PostLinkCommentRequest) -> PostLinkCommentResponse:
        """Execute guest comment flow.

        Raises:
            AccessDeniedError: If the token is invalid or lacks comment rights
            ValidationError: If the body or email is malformed
        """
        token = parse_token(request.token)
        body = normalize_comment_body(request.body)
        if request.email:
            author = f"{parse_email(request.email).root} (guest)"
        else:
            author = "anonymous (guest)"

        with logfire.span("post_link_comment"):
            link = await self.redemption_service.authorize(token, GuestAction.COMMENT)

            comment = await self.comment_service.create_comment(
                link.resource_id, author_email=author, body=body
            )
            await self.activity_service.record(
                link.resource_id,
                ActivityKind.COMMENT,
                {"author_email": author, "via": "link"},
            )
            return PostLinkCommentResponse(comment=CommentItem.from_comment(comment))
