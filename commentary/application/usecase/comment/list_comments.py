"""List comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService
from commentary.domain.value import PostId

from .item import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: UUID


class ListCommentsResponse(BaseModel):
    """List comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing the live comments of a post.

    Tombstoned comments are left out; a post without comments yields an
    empty list.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, context: RequestContext, request: ListCommentsRequest
    ) -> ListCommentsResponse:
        """Execute list comments flow."""
        with logfire.span("list_comments", correlation_id=context.correlation_id):
            comments = await self.comment_service.list_comments(
                PostId(request.post_id), include_deleted=False
            )

            items = [
                CommentItem.from_comment(comment, context.caller_id)
                for comment in comments
            ]
            return ListCommentsResponse(
                post_id=str(request.post_id),
                comments=items,
                total=len(items),
            )
