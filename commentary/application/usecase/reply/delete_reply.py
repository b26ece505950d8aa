"""Delete reply use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import ReplyService
from commentary.domain.value import CommentId, PostId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    post_id: UUID
    parent_id: UUID
    reply_id: UUID


class DeleteReplyResponse(BaseModel):
    """Delete reply response."""

    reply_id: str
    parent_id: str
    deleted: bool


class DeleteReplyUseCase(BaseUseCase):
    """Use case for deleting a reply.

    Note: the reply is unlinked from its parent before authorship is
    checked, so a rejected caller still leaves it unlinked.
    """

    def __init__(self, reply_service: ReplyService) -> None:
        """Initialize delete reply use case.

        Args:
            reply_service: Reply domain service
        """
        self.reply_service = reply_service

    async def execute(
        self, context: RequestContext, request: DeleteReplyRequest
    ) -> DeleteReplyResponse:
        """Execute delete reply flow.

        Raises:
            NotFoundError: If parent or reply is missing, or not linked
            ParentDeletedError: If the parent is tombstoned
            AlreadyDeletedError: If the reply is tombstoned
            NotAuthorizedError: If the caller is not the reply's author
        """
        with logfire.span("delete_reply", correlation_id=context.correlation_id):
            reply = await self.reply_service.delete_reply(
                post_id=PostId(request.post_id),
                parent_id=CommentId(request.parent_id),
                reply_id=CommentId(request.reply_id),
                caller_id=context.caller_id,
            )
            return DeleteReplyResponse(
                reply_id=str(reply.id),
                parent_id=str(request.parent_id),
                deleted=reply.deleted,
            )
