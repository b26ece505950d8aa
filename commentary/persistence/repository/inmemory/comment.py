"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from commentary.domain.error import NotFoundError, StaleCommentError
from commentary.domain.model.comment import Comment
from commentary.domain.repository.comment import CommentRepository
from commentary.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Applies the same optimistic version check as the PostgreSQL repository.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_one(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID under a post."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.post_id != post_id:
            return None
        return comment

    async def find_many(
        self,
        post_id: PostId,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        # Filter deleted
        if not include_deleted:
            comments = [c for c in comments if not c.deleted]

        comments.sort(key=lambda c: c.created_at)

        return comments

    async def find_by_ids(
        self, post_id: PostId, comment_ids: Sequence[CommentId]
    ) -> list[Comment]:
        """Fetch several comments of one post in the given order."""
        return [
            self._comments[cid]
            for cid in comment_ids
            if cid in self._comments and self._comments[cid].post_id == post_id
        ]

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stored = comment.model_copy(update={"version": 0})
        self._comments[comment.id] = stored
        return stored

    async def save(self, comment: Comment) -> Comment:
        """Update a comment if its stored version still matches."""
        current = self._comments.get(comment.id)
        if current is None:
            raise NotFoundError("comment", str(comment.id))
        if current.version != comment.version:
            raise StaleCommentError(str(comment.id), comment.version)

        stored = comment.model_copy(update={"version": comment.version + 1})
        self._comments[comment.id] = stored
        return stored

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)
