"""PostgreSQL implementation of Objective repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Objective
from collab.domain.repository import ObjectiveRepository
from collab.domain.value import ResourceId
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import objective_to_dict, row_to_objective
from collab.persistence.tables import objectives_table


class PostgresObjectiveRepository(ObjectiveRepository):
    """PostgreSQL implementation of ObjectiveRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_storage_errors
    async def find_by_id(self, objective_id: ResourceId) -> Optional[Objective]:
        """Find an objective by ID."""
        stmt = select(objectives_table).where(
            objectives_table.c.id == objective_id.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_objective(dict(row)) if row else None

    @translate_storage_errors
    async def save(self, objective: Objective) -> Objective:
        """Save an objective (create or update)."""
        objective_dict = objective_to_dict(objective)

        existing = await self.find_by_id(objective.id)

        if existing:
            stmt = (
                update(objectives_table)
                .where(objectives_table.c.id == objective.id.root)
                .values(**objective_dict)
            )
        else:
            stmt = insert(objectives_table).values(**objective_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return objective
