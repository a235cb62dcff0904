"""PostgreSQL implementation of AccessRecord repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import AccessRecord
from collab.domain.repository import AccessRecordRepository
from collab.domain.value import ShareLinkId
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import access_record_to_dict, row_to_access_record
from collab.persistence.tables import objective_link_access_table


class PostgresAccessRecordRepository(AccessRecordRepository):
    """PostgreSQL implementation of AccessRecordRepository (insert-only)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_storage_errors
    async def append(self, record: AccessRecord) -> AccessRecord:
        """Append an access record."""
        stmt = insert(objective_link_access_table).values(
            **access_record_to_dict(record)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    @translate_storage_errors
    async def find_by_link(
        self, link_id: ShareLinkId, limit: int = 100
    ) -> list[AccessRecord]:
        """Find access records for a link, newest first."""
        stmt = (
            select(objective_link_access_table)
            .where(objective_link_access_table.c.link_id == link_id)
            .order_by(objective_link_access_table.c.accessed_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_access_record(dict(row)) for row in rows]
