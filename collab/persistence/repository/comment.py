"""PostgreSQL implementation of Comment repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.domain.model import Comment
from collab.domain.repository import CommentRepository
from collab.domain.value import ResourceId
from collab.persistence.error import translate_storage_errors
from collab.persistence.mappers import comment_to_dict, row_to_comment
from collab.persistence.tables import objective_comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_storage_errors
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(objective_comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    @translate_storage_errors
    async def find_by_resource(self, resource_id: ResourceId) -> list[Comment]:
        """Find comments on an objective, oldest first."""
        stmt = (
            select(objective_comments_table)
            .where(objective_comments_table.c.objective_id == resource_id.root)
            .order_by(objective_comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_comment(dict(row)) for row in rows]
