"""Activity repository interface."""

from abc import ABC, abstractmethod

from collab.domain.model.activity import Activity
from collab.domain.value import ResourceId


class ActivityRepository(ABC):
    """Append-only store of objective activity."""

    @abstractmethod
    async def append(self, activity: Activity) -> Activity:
        """Append an activity entry."""
        pass

    @abstractmethod
    async def find_recent(
        self, resource_id: ResourceId, limit: int = 50
    ) -> list[Activity]:
        """Find the most recent activity for a resource, newest first."""
        pass
