"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, PostId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: UUID
    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase(BaseUseCase):
    """Use case for tombstoning a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, context: RequestContext, request: DeleteCommentRequest
    ) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist under the post
            AlreadyDeletedError: If the comment is already tombstoned
            NotAuthorizedError: If the caller doesn't own the comment
        """
        with logfire.span("delete_comment", correlation_id=context.correlation_id):
            comment = await self.comment_service.delete_comment(
                post_id=PostId(request.post_id),
                comment_id=CommentId(request.comment_id),
                caller_id=context.caller_id,
            )
            return DeleteCommentResponse(
                comment_id=str(comment.id), deleted=comment.deleted
            )
