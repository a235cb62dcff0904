"""Comment domain service."""

from uuid import uuid4

import logfire

from collab.domain.error import ValidationError
from collab.domain.model.comment import Comment
from collab.domain.repository import CommentRepository
from collab.domain.value import CommentId, ResourceId, UserId
from collab.util.clock import Clock, utc_now

from .base import Service

MAX_COMMENT_LENGTH = 5000


def normalize_comment_body(body: str) -> str:
    """Strip a comment body and check its length.

    Raises:
        ValidationError: If the body is empty or too long
    """
    body = body.strip()
    if not body:
        raise ValidationError("body", "Comment can not be empty")
    if len(body) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            "body", f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
        )
    return body


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, clock: Clock = utc_now
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            clock: Time source for ``created_at``
        """
        self.comment_repository = comment_repository
        self.clock = clock

    async def create_comment(
        self,
        resource_id: ResourceId,
        author_email: str,
        body: str,
        author_id: UserId | None = None,
    ) -> Comment:
        """Create a comment on an objective.

        Args:
            resource_id: Commented objective
            author_email: Display label, e.g. "guest@example.com (guest)"
            body: Comment text
            author_id: Owner user id (None for guests)

        Returns:
            Created comment

        Raises:
            ValidationError: If the body is empty or too long
        """
        body = normalize_comment_body(body)

        with logfire.span(
            "comment_service.create_comment",
            resource_id=resource_id.root,
            guest=author_id is None,
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                resource_id=resource_id,
                author_id=author_id,
                author_email=author_email,
                body=body,
                created_at=self.clock(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                resource_id=resource_id.root,
            )
            return saved

    async def list_comments(self, resource_id: ResourceId) -> list[Comment]:
        """List comments on an objective, oldest first."""
        with logfire.span(
            "comment_service.list_comments", resource_id=resource_id.root
        ):
            return await self.comment_repository.find_by_resource(resource_id)
