"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for the comment document store. Implementations
    live in the persistence layer and must:

    - guarantee single-document atomicity for ``save``, using the comment's
      ``version`` as an optimistic lock
    - raise ``UnavailableError`` when the backing store fails
    """

    @abstractmethod
    async def find_one(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID, constrained to a post.

        A comment that exists under a different post is not returned.

        Args:
            post_id: The owning post ID
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (tombstoned or not), None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        post_id: PostId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID
            include_deleted: Whether to include tombstoned comments

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, post_id: PostId, comment_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Fetch several comments of one post at once.

        Args:
            post_id: The owning post ID
            comment_ids: IDs to fetch

        Returns:
            Found comments in the order of ``comment_ids``; unknown IDs are
            skipped
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Returns:
            The stored comment (version 0)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Update an existing comment.

        The write succeeds only if the stored version still equals
        ``comment.version``.

        Args:
            comment: The comment to save

        Returns:
            The saved comment with its version incremented

        Raises:
            StaleCommentError: If the stored version moved on
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Remove a comment document (hard delete).

        Comment deletion is a tombstone via ``save``; this is only used to
        undo a reply whose parent could not be linked.

        Args:
            comment_id: The comment ID to delete
        """
        pass
