"""Update comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, CommentUpdate, PostId

from .item import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: UUID
    comment_id: UUID
    update: CommentUpdate  # Only body and/or summary


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, context: RequestContext, request: UpdateCommentRequest
    ) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist under the post
            AlreadyDeletedError: If the comment is tombstoned
            NotAuthorizedError: If the caller doesn't own the comment
        """
        with logfire.span("update_comment", correlation_id=context.correlation_id):
            comment = await self.comment_service.update_comment(
                post_id=PostId(request.post_id),
                comment_id=CommentId(request.comment_id),
                caller_id=context.caller_id,
                update=request.update,
            )
            return UpdateCommentResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )
