"""In-memory activity repository for testing."""

from collab.domain.model.activity import Activity
from collab.domain.repository.activity import ActivityRepository
from collab.domain.value import ResourceId


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self) -> None:
        self._activity: list[Activity] = []

    async def append(self, activity: Activity) -> Activity:
        self._activity.append(activity)
        return activity

    async def find_recent(
        self, resource_id: ResourceId, limit: int = 50
    ) -> list[Activity]:
        matches = [a for a in self._activity if a.resource_id == resource_id]
        matches.sort(key=lambda a: a.created_at, reverse=True)
        return matches[:limit]
