"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Invite
from collab.domain.repository import InviteRepository
from collab.domain.value import InviteId, ResourceId, ShareToken
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import invite_to_dict, row_to_invite
from collab.persistence.tables import objective_invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_storage_errors
    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(objective_invites_table).where(
            objective_invites_table.c.id == invite_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    @translate_storage_errors
    async def find_by_token(self, token: ShareToken) -> Optional[Invite]:
        """Find an invite by its token.

        Args:
            token: Invite token to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(objective_invites_table).where(
            objective_invites_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    @translate_storage_errors
    async def find_by_resource(
        self, resource_id: ResourceId, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """Find invites for an objective with pagination.

        Args:
            resource_id: Objective ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of matching invites, newest first
        """
        stmt = (
            select(objective_invites_table)
            .where(objective_invites_table.c.objective_id == resource_id.root)
            .order_by(objective_invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite(dict(row)) for row in rows]

    @translate_storage_errors
    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        invite_dict = invite_to_dict(invite)

        # Check if invite exists
        existing = await self.find_by_id(invite.id)

        if existing:
            stmt = (
                update(objective_invites_table)
                .where(objective_invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
        else:
            stmt = insert(objective_invites_table).values(**invite_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invite

    @translate_storage_errors
    async def mark_used(
        self, invite_id: InviteId, used_at: datetime
    ) -> Optional[Invite]:
        """Set ``used_at`` only where it is still NULL.

        The WHERE clause makes this a compare-and-set: of two concurrent
        redemptions, exactly one gets a row back.
        """
        stmt = (
            update(objective_invites_table)
            .where(
                and_(
                    objective_invites_table.c.id == invite_id,
                    objective_invites_table.c.used_at.is_(None),
                )
            )
            .values(used_at=used_at)
            .returning(*objective_invites_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_invite(dict(row)) if row else None
