"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import CommentContent, PostId
from commentary.domain.value.types import BODY_MAX_LENGTH, SUMMARY_MAX_LENGTH

from .item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: UUID
    body: str = Field(min_length=1, max_length=BODY_MAX_LENGTH)
    summary: str = Field(default="", max_length=SUMMARY_MAX_LENGTH)


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a top-level comment on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, context: RequestContext, request: CreateCommentRequest
    ) -> CreateCommentResponse:
        """Execute create comment flow.

        The caller becomes the comment's author.
        """
        with logfire.span("create_comment", correlation_id=context.correlation_id):
            comment = await self.comment_service.create_comment(
                post_id=PostId(request.post_id),
                author_id=context.caller_id,
                content=CommentContent(body=request.body, summary=request.summary),
            )
            return CreateCommentResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )
