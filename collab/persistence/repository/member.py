"""PostgreSQL implementation of the collaborator roster repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import CollabMember
from collab.domain.repository import MemberRepository
from collab.domain.value import Email, ResourceId
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import member_to_dict, row_to_member
from collab.persistence.tables import objective_collab_members_table

members = objective_collab_members_table


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository.

    ``uq_objective_collab_members_email`` keeps one row per
    (objective, email).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_storage_errors
    async def find_by_resource(self, resource_id: ResourceId) -> list[CollabMember]:
        stmt = (
            select(members)
            .where(members.c.objective_id == resource_id.root)
            .order_by(members.c.joined_at, members.c.email)
        )
        result = await self.session.execute(stmt)
        return [row_to_member(dict(row)) for row in result.mappings().all()]

    @translate_storage_errors
    async def find_by_email(
        self, resource_id: ResourceId, email: Email
    ) -> Optional[CollabMember]:
        stmt = select(members).where(
            and_(
                members.c.objective_id == resource_id.root,
                members.c.email == email.root,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    @translate_storage_errors
    async def upsert(self, member: CollabMember) -> CollabMember:
        """Insert the member, or change the role of the existing row."""
        stmt = pg_insert(members).values(**member_to_dict(member))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_objective_collab_members_email",
            set_={"role": stmt.excluded.role},
        ).returning(*members.c)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_member(dict(row))

    @translate_storage_errors
    async def remove(self, resource_id: ResourceId, email: Email) -> bool:
        stmt = (
            members.delete()
            .where(
                and_(
                    members.c.objective_id == resource_id.root,
                    members.c.email == email.root,
                )
            )
            .returning(members.c.id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed
