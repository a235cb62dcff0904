"""PostgreSQL implementation of Activity repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Activity
from collab.domain.repository import ActivityRepository
from collab.domain.value import ResourceId
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import activity_to_dict, row_to_activity
from collab.persistence.tables import objective_activity_table


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_storage_errors
    async def append(self, activity: Activity) -> Activity:
        """Append an activity entry."""
        stmt = insert(objective_activity_table).values(**activity_to_dict(activity))
        await self.session.execute(stmt)
        await self.session.flush()
        return activity

    @translate_storage_errors
    async def find_recent(
        self, resource_id: ResourceId, limit: int = 50
    ) -> list[Activity]:
        """Find the most recent activity for an objective."""
        stmt = (
            select(objective_activity_table)
            .where(objective_activity_table.c.objective_id == resource_id.root)
            .order_by(objective_activity_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_activity(dict(row)) for row in rows]
