"""Comment repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model.comment import Comment
from collab.domain.value import ResourceId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def find_by_resource(self, resource_id: ResourceId) -> list[Comment]:
        """Find comments on a resource, oldest first.

        Args:
            resource_id: The commented resource

        Returns:
            List of comments
        """
        pass
