"""Like and dislike use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.application.usecase.comment.item import CommentItem
from commentary.domain.service import ReactionService
from commentary.domain.value import CommentId, PostId


class ReactionRequest(BaseModel):
    """Reaction request, shared by like/dislike/unlike/undislike."""

    post_id: UUID
    comment_id: UUID


class ReactionResponse(BaseModel):
    """Reaction response with the comment's updated reactions."""

    comment: CommentItem


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize like use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, context: RequestContext, request: ReactionRequest
    ) -> ReactionResponse:
        """Like the comment, replacing the caller's dislike if any.

        Raises:
            DuplicateReactionError: If the caller already likes it
            AlreadyDeletedError: If the comment is tombstoned
        """
        with logfire.span("like_comment", correlation_id=context.correlation_id):
            comment = await self.reaction_service.like(
                PostId(request.post_id),
                CommentId(request.comment_id),
                context.caller_id,
            )
            return ReactionResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )


class DislikeCommentUseCase(BaseUseCase):
    """Use case for disliking a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize dislike use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, context: RequestContext, request: ReactionRequest
    ) -> ReactionResponse:
        """Dislike the comment, replacing the caller's like if any.

        Raises:
            DuplicateReactionError: If the caller already dislikes it
            AlreadyDeletedError: If the comment is tombstoned
        """
        with logfire.span("dislike_comment", correlation_id=context.correlation_id):
            comment = await self.reaction_service.dislike(
                PostId(request.post_id),
                CommentId(request.comment_id),
                context.caller_id,
            )
            return ReactionResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )
