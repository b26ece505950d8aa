"""PostgreSQL implementation of Comment repository."""

from typing import Any, Dict, List, Optional, Sequence

import logfire
from sqlalchemy import select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.error import NotFoundError, StaleCommentError, UnavailableError
from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, PostId
from commentary.persistence.mappers import comment_to_dict, row_to_comment
from commentary.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every write is committed on its own: a comment row is the unit of
    atomicity, and a multi-step operation keeps whatever steps completed.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any) -> Result:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Comment store query failed", error=str(e))
            await self.session.rollback()
            raise UnavailableError("Comment store unavailable") from e

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logfire.error("Comment store commit failed", error=str(e))
            await self.session.rollback()
            raise UnavailableError("Comment store unavailable") from e

    def _comment_to_db_dict(self, comment: Comment) -> Dict[str, Any]:
        comment_dict = comment_to_dict(comment)
        comment_dict.pop("id")
        comment_dict.pop("created_at")
        return comment_dict

    async def find_one(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID under a post."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_many(
        self,
        post_id: PostId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted.is_(False))

        stmt = stmt.order_by(comments_table.c.created_at)

        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_ids(
        self, post_id: PostId, comment_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Fetch several comments of one post in the given order."""
        if not comment_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.id.in_(list(comment_ids)))
        )
        result = await self._execute(stmt)
        by_id = {
            comment.id: comment
            for comment in (row_to_comment(row._asdict()) for row in result.fetchall())
        }
        return [by_id[cid] for cid in comment_ids if cid in by_id]

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        comment_dict = comment_to_dict(comment)
        comment_dict["version"] = 0
        stmt = comments_table.insert().values(**comment_dict).returning(comments_table)
        result = await self._execute(stmt)
        row = result.fetchone()
        await self._commit()
        return row_to_comment(row._asdict())

    async def save(self, comment: Comment) -> Comment:
        """Update a comment if its stored version still matches."""
        comment_dict = self._comment_to_db_dict(comment)
        comment_dict["version"] = comment.version + 1
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .where(comments_table.c.version == comment.version)
            .values(**comment_dict)
            .returning(comments_table)
        )
        result = await self._execute(stmt)
        row = result.fetchone()

        if row is None:
            await self.session.rollback()
            exists = await self.find_one(comment.post_id, comment.id)
            if exists is None:
                raise NotFoundError("comment", str(comment.id))
            logfire.warn(
                "Stale comment write rejected",
                comment_id=str(comment.id),
                expected_version=comment.version,
                stored_version=exists.version,
            )
            raise StaleCommentError(str(comment.id), comment.version)

        await self._commit()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self._execute(stmt)
        await self._commit()
