"""Reaction domain service."""

import logfire

from commentary.domain.error import DuplicateReactionError, NoReactionError
from commentary.domain.model.comment import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, PostId, Reaction, UserId

from .base import Service
from .comment_service import CommentService

_PAST_TENSE = {Reaction.LIKED: "liked", Reaction.DISLIKED: "disliked"}


class ReactionService(Service):
    """Domain service for likes and dislikes.

    Each (comment, caller) pair is a small state machine over
    ``none | liked | disliked``:

    - like/dislike move the caller into that state, switching over from the
      opposite reaction if needed; repeating the current reaction is a
      conflict
    - unlike/undislike move the caller back to ``none``; removing a reaction
      the caller does not hold is a conflict

    Any authenticated caller, the author included, may react. Tombstoned
    comments accept no reactions.
    """

    span_prefix = "reaction_service"

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize reaction service.

        Args:
            comment_repository: Comment repository
            comment_service: Comment service for lookups
        """
        self.comment_repository = comment_repository
        self.comment_service = comment_service

    async def _react(
        self,
        post_id: PostId,
        comment_id: CommentId,
        user_id: UserId,
        reaction: Reaction,
    ) -> Comment:
        comment = await self.comment_service.resolve(post_id, comment_id)
        current = comment.reaction_of(user_id)
        if current is reaction:
            logfire.warn(
                "Duplicate reaction",
                comment_id=str(comment_id),
                user_id=str(user_id),
                reaction=reaction.value,
            )
            raise DuplicateReactionError(
                _PAST_TENSE[reaction], str(comment_id), str(user_id)
            )

        saved = await self.comment_repository.save(
            comment.with_reaction(user_id, reaction)
        )
        logfire.info(
            "Reaction set",
            comment_id=str(comment_id),
            user_id=str(user_id),
            previous=current.value,
            reaction=reaction.value,
        )
        return saved

    async def _withdraw(
        self,
        post_id: PostId,
        comment_id: CommentId,
        user_id: UserId,
        reaction: Reaction,
    ) -> Comment:
        comment = await self.comment_service.resolve(post_id, comment_id)
        if comment.reaction_of(user_id) is not reaction:
            logfire.warn(
                "No reaction to remove",
                comment_id=str(comment_id),
                user_id=str(user_id),
                reaction=reaction.value,
            )
            raise NoReactionError(_PAST_TENSE[reaction], str(comment_id), str(user_id))

        saved = await self.comment_repository.save(
            comment.with_reaction(user_id, Reaction.NONE)
        )
        logfire.info(
            "Reaction removed",
            comment_id=str(comment_id),
            user_id=str(user_id),
            reaction=reaction.value,
        )
        return saved

    async def like(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Like a comment, replacing a dislike by the same caller.

        Raises:
            DuplicateReactionError: If the caller already likes it
        """
        with self.span("like", comment_id=str(comment_id), user_id=str(user_id)):
            return await self._react(post_id, comment_id, user_id, Reaction.LIKED)

    async def dislike(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Dislike a comment, replacing a like by the same caller.

        Raises:
            DuplicateReactionError: If the caller already dislikes it
        """
        with self.span(
            "dislike",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            return await self._react(post_id, comment_id, user_id, Reaction.DISLIKED)

    async def unlike(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Remove the caller's like.

        Raises:
            NoReactionError: If the caller does not like the comment
        """
        with self.span(
            "unlike",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            return await self._withdraw(post_id, comment_id, user_id, Reaction.LIKED)

    async def undislike(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Remove the caller's dislike.

        Raises:
            NoReactionError: If the caller does not dislike the comment
        """
        with self.span(
            "undislike",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            return await self._withdraw(
                post_id, comment_id, user_id, Reaction.DISLIKED
            )
