"""Get comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, PostId

from .item import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    post_id: UUID
    comment_id: UUID


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem


class GetCommentUseCase(BaseUseCase):
    """Use case for fetching a single live comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, context: RequestContext, request: GetCommentRequest
    ) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist under the post
            AlreadyDeletedError: If the comment is tombstoned
        """
        with logfire.span("get_comment", correlation_id=context.correlation_id):
            comment = await self.comment_service.get_comment(
                PostId(request.post_id), CommentId(request.comment_id)
            )
            return GetCommentResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )
