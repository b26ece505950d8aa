"""Unlike and undislike use cases."""

import logfire

from commentary.application.context import RequestContext
from commentary.application.usecase.base import BaseUseCase
from commentary.application.usecase.comment.item import CommentItem
from commentary.domain.service import ReactionService
from commentary.domain.value import CommentId, PostId

from .react import ReactionRequest, ReactionResponse


class UnlikeCommentUseCase(BaseUseCase):
    """Use case for withdrawing a like."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize unlike use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, context: RequestContext, request: ReactionRequest
    ) -> ReactionResponse:
        """Remove the caller's like.

        Raises:
            NoReactionError: If the caller does not like the comment
            AlreadyDeletedError: If the comment is tombstoned
        """
        with logfire.span("unlike_comment", correlation_id=context.correlation_id):
            comment = await self.reaction_service.unlike(
                PostId(request.post_id),
                CommentId(request.comment_id),
                context.caller_id,
            )
            return ReactionResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )


class UndislikeCommentUseCase(BaseUseCase):
    """Use case for withdrawing a dislike."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize undislike use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, context: RequestContext, request: ReactionRequest
    ) -> ReactionResponse:
        """Remove the caller's dislike.

        Raises:
            NoReactionError: If the caller does not dislike the comment
            AlreadyDeletedError: If the comment is tombstoned
        """
        with logfire.span("undislike_comment", correlation_id=context.correlation_id):
            comment = await self.reaction_service.undislike(
                PostId(request.post_id),
                CommentId(request.comment_id),
                context.caller_id,
            )
            return ReactionResponse(
                comment=CommentItem.from_comment(comment, context.caller_id)
            )
