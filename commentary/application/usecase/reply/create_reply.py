"""Create reply use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.application.usecase.comment.item import CommentItem
from commentary.domain.service import ReplyService
from commentary.domain.value import CommentContent, CommentId, PostId
from commentary.domain.value.types import BODY_MAX_LENGTH, SUMMARY_MAX_LENGTH


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    post_id: UUID
    parent_id: UUID  # Comment being replied to
    body: str = Field(min_length=1, max_length=BODY_MAX_LENGTH)
    summary: str = Field(default="", max_length=SUMMARY_MAX_LENGTH)


class CreateReplyResponse(BaseModel):
    """Create reply response."""

    reply: CommentItem


class CreateReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(self, reply_service: ReplyService) -> None:
        """Initialize create reply use case.

        Args:
            reply_service: Reply domain service
        """
        self.reply_service = reply_service

    async def execute(
        self, context: RequestContext, request: CreateReplyRequest
    ) -> CreateReplyResponse:
        """Execute create reply flow.

        Raises:
            NotFoundError: If the parent does not exist under the post
            ParentDeletedError: If the parent is tombstoned
        """
        with logfire.span("create_reply", correlation_id=context.correlation_id):
            reply = await self.reply_service.create_reply(
                post_id=PostId(request.post_id),
                parent_id=CommentId(request.parent_id),
                author_id=context.caller_id,
                content=CommentContent(body=request.body, summary=request.summary),
            )
            return CreateReplyResponse(
                reply=CommentItem.from_comment(reply, context.caller_id)
            )
