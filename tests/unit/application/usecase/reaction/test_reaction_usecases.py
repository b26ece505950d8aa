"""Unit tests for the reaction use cases."""

from uuid import uuid4

import pytest

from commentary.application.context import RequestContext
from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from commentary.application.usecase.reaction import (
    DislikeCommentUseCase,
    LikeCommentUseCase,
    ReactionRequest,
    UndislikeCommentUseCase,
    UnlikeCommentUseCase,
)
from commentary.domain.error import DuplicateReactionError, NoReactionError
from commentary.domain.value import Reaction, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def caller():
    return RequestContext(caller_id=UserId(uuid4()))


async def _reaction_request(unit_env, caller) -> ReactionRequest:
    create = await unit_env.get(CreateCommentUseCase)
    post_id = uuid4()
    response = await create.execute(
        caller, CreateCommentRequest(post_id=post_id, body="React to me")
    )
    return ReactionRequest(post_id=post_id, comment_id=response.comment.comment_id)


class TestReactionUseCases:
    """Walk one caller through the reaction state machine."""

    @pytest.mark.asyncio
    async def test_like_dislike_undislike(self, unit_env, caller):
        # Arrange
        like = await unit_env.get(LikeCommentUseCase)
        dislike = await unit_env.get(DislikeCommentUseCase)
        undislike = await unit_env.get(UndislikeCommentUseCase)
        request = await _reaction_request(unit_env, caller)

        # Act & Assert
        liked = await like.execute(caller, request)
        assert liked.comment.my_reaction is Reaction.LIKED
        assert liked.comment.like_count == 1

        disliked = await dislike.execute(caller, request)
        assert disliked.comment.my_reaction is Reaction.DISLIKED
        assert disliked.comment.like_count == 0
        assert disliked.comment.dislike_count == 1

        cleared = await undislike.execute(caller, request)
        assert cleared.comment.my_reaction is Reaction.NONE
        assert cleared.comment.dislike_count == 0

    @pytest.mark.asyncio
    async def test_repeat_like_raises(self, unit_env, caller):
        like = await unit_env.get(LikeCommentUseCase)
        request = await _reaction_request(unit_env, caller)
        await like.execute(caller, request)

        with pytest.raises(DuplicateReactionError):
            await like.execute(caller, request)

    @pytest.mark.asyncio
    async def test_unlike_without_like_raises(self, unit_env, caller):
        unlike = await unit_env.get(UnlikeCommentUseCase)
        request = await _reaction_request(unit_env, caller)

        with pytest.raises(NoReactionError):
            await unlike.execute(caller, request)
