"""In-memory comment repository for testing."""

from collab.domain.model.comment import Comment
from collab.domain.repository.comment import CommentRepository
from collab.domain.value import ResourceId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        self._comments.append(comment)
        return comment

    async def find_by_resource(self, resource_id: ResourceId) -> list[Comment]:
        """Find comments on a resource, oldest first."""
        matches = [c for c in self._comments if c.resource_id == resource_id]
        matches.sort(key=lambda c: c.created_at)
        return matches
