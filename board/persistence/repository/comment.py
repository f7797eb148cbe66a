"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import StorageError
from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, SortOrder
from board.persistence.mappers import comment_to_dict, row_to_comment
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Comment lookup failed", error=str(e))
            raise StorageError("find_by_id") from e
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all(self, order: SortOrder = SortOrder.NEWEST) -> List[Comment]:
        """Find every comment ordered by creation time."""
        direction = desc if order == SortOrder.NEWEST else asc
        # id breaks ties between comments created in the same instant
        stmt = select(comments_table).order_by(
            direction(comments_table.c.created_at), direction(comments_table.c.id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Comment listing failed", error=str(e))
            raise StorageError("find_all") from e
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            logfire.error(
                "Comment insert failed", comment_id=str(comment.id), error=str(e)
            )
            raise StorageError("save") from e
        return comment

    async def count(self) -> int:
        """Count all stored comments."""
        stmt = select(func.count()).select_from(comments_table)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Comment count failed", error=str(e))
            raise StorageError("count") from e
        return result.scalar() or 0
