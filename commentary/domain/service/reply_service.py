"""Reply domain service (comment tree maintenance)."""

from uuid import uuid4

import logfire

from commentary.domain.error import NotFoundError, ParentDeletedError
from commentary.domain.model.comment import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentContent, CommentId, PostId, UserId

from .base import Service
from .comment_service import CommentService


class ReplyService(Service):
    """Domain service for replies.

    Owns every write to a comment's ``children`` list. A parent's children
    only ever change here, and the parent is always re-read before it is
    changed.
    """

    span_prefix = "reply_service"

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize reply service.

        Args:
            comment_repository: Comment repository
            comment_service: Comment service for lookup and ownership checks
        """
        self.comment_repository = comment_repository
        self.comment_service = comment_service

    async def _resolve_parent(self, post_id: PostId, parent_id: CommentId) -> Comment:
        parent = await self.comment_service.find(post_id, parent_id)
        if parent.deleted:
            logfire.warn(
                "Parent comment already deleted",
                parent_id=str(parent_id),
                post_id=str(post_id),
            )
            raise ParentDeletedError(str(parent_id))
        return parent

    async def create_reply(
        self,
        post_id: PostId,
        parent_id: CommentId,
        author_id: UserId,
        content: CommentContent,
    ) -> Comment:
        """Create a reply and link it from its parent.

        The reply is created first, then appended to the parent's children.
        If the parent cannot be saved (e.g. a concurrent reply bumped its
        version) the reply is removed again before the error propagates, so
        a reply is never left without its parent link.

        Args:
            post_id: Post ID
            parent_id: Comment being replied to
            author_id: Reply author
            content: Reply body and optional summary

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent does not exist under the post
            ParentDeletedError: If the parent is tombstoned
        """
        with self.span(
            "create_reply",
            post_id=str(post_id),
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            parent = await self._resolve_parent(post_id, parent_id)

            reply = await self.comment_repository.create(
                Comment.new(
                    comment_id=CommentId(uuid4()),
                    post_id=post_id,
                    author_id=author_id,
                    content=content,
                    parent_id=parent.id,
                )
            )

            try:
                await self.comment_repository.save(parent.with_child(reply.id))
            except Exception as e:
                logfire.warn(
                    "Linking reply to parent failed, removing reply",
                    reply_id=str(reply.id),
                    parent_id=str(parent_id),
                    error=str(e),
                )
                try:
                    await self.comment_repository.delete(reply.id)
                except Exception as cleanup_error:
                    logfire.error(
                        "Removing unlinked reply failed",
                        reply_id=str(reply.id),
                        parent_id=str(parent_id),
                        error=str(cleanup_error),
                    )
                raise e

            logfire.info(
                "Reply created",
                reply_id=str(reply.id),
                parent_id=str(parent_id),
                post_id=str(post_id),
            )
            return reply

    async def list_replies(self, post_id: PostId, parent_id: CommentId) -> list[Comment]:
        """List the live replies of a comment, in reply order.

        Raises:
            NotFoundError: If the parent does not exist, or it has no live
                replies (resource ``"replies"``)
            ParentDeletedError: If the parent is tombstoned
        """
        with self.span(
            "list_replies",
            post_id=str(post_id),
            parent_id=str(parent_id),
        ):
            parent = await self._resolve_parent(post_id, parent_id)

            children = await self.comment_repository.find_by_ids(
                post_id, parent.children
            )
            replies = [child for child in children if not child.deleted]
            if not replies:
                logfire.info("No replies for comment", parent_id=str(parent_id))
                raise NotFoundError("replies", str(parent_id))

            logfire.info(
                "Replies retrieved",
                parent_id=str(parent_id),
                count=len(replies),
            )
            return replies

    async def delete_reply(
        self,
        post_id: PostId,
        parent_id: CommentId,
        reply_id: CommentId,
        caller_id: UserId,
    ) -> Comment:
        """Unlink a reply from its parent and tombstone it.

        The reply is removed from the parent's children BEFORE the caller's
        authorship is checked. A caller who is not the reply's author gets
        ``NotAuthorizedError`` but the reply stays unlinked from the parent.

        Returns:
            The tombstoned reply

        Raises:
            NotFoundError: If parent or reply is missing, or the reply is not
                a child of the parent
            ParentDeletedError: If the parent is tombstoned
            AlreadyDeletedError: If the reply is tombstoned
            NotAuthorizedError: If the caller is not the reply's author
        """
        with self.span(
            "delete_reply",
            post_id=str(post_id),
            parent_id=str(parent_id),
            reply_id=str(reply_id),
            caller_id=str(caller_id),
        ):
            parent = await self._resolve_parent(post_id, parent_id)
            reply = await self.comment_service.resolve(post_id, reply_id)

            if not parent.has_child(reply_id):
                logfire.warn(
                    "Reply is not a child of parent",
                    reply_id=str(reply_id),
                    parent_id=str(parent_id),
                )
                raise NotFoundError(f"reply of comment {parent_id}", str(reply_id))

            await self.comment_repository.save(parent.without_child(reply_id))
            logfire.info(
                "Reply unlinked from parent",
                reply_id=str(reply_id),
                parent_id=str(parent_id),
            )

            self.comment_service.assert_owner(reply, caller_id)
            return await self.comment_service.tombstone(reply)
