"""PostgreSQL implementation of ShareLink repository."""

from typing import Optional

from sqlalchemy import and_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.error import ActiveLinkConflictError
from collab.domain.model import ShareLink
from collab.domain.repository import ShareLinkRepository
from collab.domain.value import ResourceId, ShareLinkId, ShareRole, ShareToken
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import row_to_share_link, share_link_to_dict
from collab.persistence.tables import ACTIVE_LINK_PREDICATE, objective_links_table


class PostgresShareLinkRepository(ShareLinkRepository):
    """PostgreSQL implementation of ShareLinkRepository.

    The partial unique index ``uq_objective_links_active`` is the single
    source of truth for "one active link per (objective, role)".
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_storage_errors
    async def find_by_id(self, link_id: ShareLinkId) -> Optional[ShareLink]:
        """Find a link by ID."""
        stmt = select(objective_links_table).where(
            objective_links_table.c.id == link_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_share_link(dict(row)) if row else None

    @translate_storage_errors
    async def find_by_token(self, token: ShareToken) -> Optional[ShareLink]:
        """Find a link by its token."""
        stmt = select(objective_links_table).where(
            objective_links_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_share_link(dict(row)) if row else None

    @translate_storage_errors
    async def find_active(
        self, resource_id: ResourceId, role: ShareRole
    ) -> Optional[ShareLink]:
        """Find the non-revoked link for an objective and role.

        Uses the partial unique index, so at most one row matches.
        """
        stmt = select(objective_links_table).where(
            and_(
                objective_links_table.c.objective_id == resource_id.root,
                objective_links_table.c.role == role.value,
                objective_links_table.c.revoked.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_share_link(dict(row)) if row else None

    @translate_storage_errors
    async def find_by_resource(self, resource_id: ResourceId) -> list[ShareLink]:
        """Find all links for an objective, newest first."""
        stmt = (
            select(objective_links_table)
            .where(objective_links_table.c.objective_id == resource_id.root)
            .order_by(objective_links_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_share_link(dict(row)) for row in rows]

    @translate_storage_errors
    async def create(self, link: ShareLink) -> ShareLink:
        """Insert a new link unless an active one already exists.

        ``ON CONFLICT DO NOTHING`` against the partial index makes a losing
        concurrent insert wait for the winner and then return no row,
        rather than failing the transaction.

        Raises:
            ActiveLinkConflictError: If a non-revoked link already exists
        """
        stmt = (
            pg_insert(objective_links_table)
            .values(**share_link_to_dict(link))
            .on_conflict_do_nothing(
                index_elements=["objective_id", "role"],
                index_where=ACTIVE_LINK_PREDICATE,
            )
            .returning(*objective_links_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            raise ActiveLinkConflictError(link.resource_id.root, link.role.value)

        await self.session.flush()
        return row_to_share_link(dict(row))

    @translate_storage_errors
    async def mark_revoked(self, link_id: ShareLinkId) -> Optional[ShareLink]:
        """Set ``revoked = true``. Never clears the flag."""
        stmt = (
            update(objective_links_table)
            .where(objective_links_table.c.id == link_id)
            .values(revoked=True)
            .returning(*objective_links_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_share_link(dict(row)) if row else None
