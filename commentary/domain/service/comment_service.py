"""Comment domain service."""

from uuid import uuid4

import logfire

from commentary.domain.error import (
    AlreadyDeletedError,
    NotAuthorizedError,
    NotFoundError,
)
from commentary.domain.model.comment import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import (
    CommentContent,
    CommentId,
    CommentUpdate,
    PostId,
    UserId,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment lookup, authorization and content changes.

    Every operation re-reads the comment from the repository before acting on
    it; nothing is cached between calls.
    """

    span_prefix = "comment_service"

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def find(self, post_id: PostId, comment_id: CommentId) -> Comment:
        """Find a comment under a post, tombstoned or not.

        Raises:
            NotFoundError: If no comment with this ID exists under the post
        """
        comment = await self.comment_repository.find_one(post_id, comment_id)
        if comment is None:
            logfire.warn(
                "Comment not found",
                comment_id=str(comment_id),
                post_id=str(post_id),
            )
            raise NotFoundError("comment", str(comment_id))
        return comment

    async def resolve(self, post_id: PostId, comment_id: CommentId) -> Comment:
        """Find a live comment under a post.

        Args:
            post_id: Owning post ID
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment does not exist under the post
            AlreadyDeletedError: If the comment has been tombstoned
        """
        comment = await self.find(post_id, comment_id)
        if comment.deleted:
            logfire.warn(
                "Comment already deleted",
                comment_id=str(comment_id),
                post_id=str(post_id),
            )
            raise AlreadyDeletedError("comment", str(comment_id))
        return comment

    def assert_owner(self, comment: Comment, caller_id: UserId) -> None:
        """Check the caller authored the comment.

        Raises:
            NotAuthorizedError: If the caller is not the author
        """
        if comment.author_id != caller_id:
            logfire.warn(
                "Caller is not the comment author",
                comment_id=str(comment.id),
                author_id=str(comment.author_id),
                caller_id=str(caller_id),
            )
            raise NotAuthorizedError("comment", str(comment.id), str(caller_id))

    async def get_comment(self, post_id: PostId, comment_id: CommentId) -> Comment:
        """Get a live comment by ID."""
        with self.span(
            "get_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            comment = await self.resolve(post_id, comment_id)
            logfire.info("Comment retrieved", comment_id=str(comment_id))
            return comment

    async def list_comments(
        self, post_id: PostId, include_deleted: bool = False
    ) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID
            include_deleted: Whether to include tombstoned comments

        Returns:
            List of comments (may be empty)
        """
        with self.span(
            "list_comments",
            post_id=str(post_id),
            include_deleted=include_deleted,
        ):
            comments = await self.comment_repository.find_many(
                post_id=post_id,
                include_deleted=include_deleted,
            )
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: CommentContent,
    ) -> Comment:
        """Create a top-level comment on a post.

        Replies go through ``ReplyService.create_reply`` so the parent link
        is maintained.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Body and optional summary

        Returns:
            Created comment
        """
        with self.span(
            "create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            comment = Comment.new(
                comment_id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
            )
            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_id=str(author_id),
            )
            return saved

    async def update_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        caller_id: UserId,
        update: CommentUpdate,
    ) -> Comment:
        """Update the content of a comment. Author only.

        Args:
            post_id: Post ID
            comment_id: Comment ID
            caller_id: Calling user
            update: Allow-listed fields to change

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist under the post
            AlreadyDeletedError: If the comment is tombstoned
            NotAuthorizedError: If the caller is not the author
        """
        with self.span(
            "update_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            caller_id=str(caller_id),
            fields=sorted(update.changes()),
        ):
            comment = await self.resolve(post_id, comment_id)
            self.assert_owner(comment, caller_id)

            updated = await self.comment_repository.save(comment.edited(update))
            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                version=updated.version,
            )
            return updated

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, caller_id: UserId
    ) -> Comment:
        """Tombstone a comment. Author only.

        Raises:
            NotFoundError: If the comment does not exist under the post
            AlreadyDeletedError: If the comment is already tombstoned
            NotAuthorizedError: If the caller is not the author
        """
        with self.span(
            "delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            caller_id=str(caller_id),
        ):
            comment = await self.resolve(post_id, comment_id)
            self.assert_owner(comment, caller_id)
            return await self.tombstone(comment)

    async def tombstone(self, comment: Comment) -> Comment:
        """Persist the tombstoned form of a live comment.

        Callers must have rejected already-deleted comments via ``resolve``.
        """
        deleted = await self.comment_repository.save(comment.tombstoned())
        logfire.info(
            "Comment tombstoned",
            comment_id=str(comment.id),
            detached_children=len(deleted.detached_children),
        )
        return deleted
