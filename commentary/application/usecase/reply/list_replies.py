"""List replies use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.application.usecase.comment.item import CommentItem
from commentary.domain.service import ReplyService
from commentary.domain.value import CommentId, PostId


class ListRepliesRequest(BaseModel):
    """List replies request."""

    post_id: UUID
    parent_id: UUID


class ListRepliesResponse(BaseModel):
    """List replies response."""

    parent_id: str
    replies: list[CommentItem]
    total: int


class ListRepliesUseCase(BaseUseCase):
    """Use case for listing the live replies of a comment."""

    def __init__(self, reply_service: ReplyService) -> None:
        """Initialize list replies use case.

        Args:
            reply_service: Reply domain service
        """
        self.reply_service = reply_service

    async def execute(
        self, context: RequestContext, request: ListRepliesRequest
    ) -> ListRepliesResponse:
        """Execute list replies flow.

        Raises:
            NotFoundError: If the parent is missing or has no live replies
            ParentDeletedError: If the parent is tombstoned
        """
        with logfire.span("list_replies", correlation_id=context.correlation_id):
            replies = await self.reply_service.list_replies(
                PostId(request.post_id), CommentId(request.parent_id)
            )
            items = [
                CommentItem.from_comment(reply, context.caller_id) for reply in replies
            ]
            return ListRepliesResponse(
                parent_id=str(request.parent_id),
                replies=items,
                total=len(items),
            )
