"""Unit tests for GetCommentUseCase and ListCommentsUseCase."""

from uuid import uuid4

import pytest

from commentary.application.context import RequestContext
from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from commentary.application.usecase.reaction import (
    LikeCommentUseCase,
    ReactionRequest,
)
from commentary.domain.value import Reaction, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_list_comments_empty(self, unit_env):
        list_comments = await unit_env.get(ListCommentsUseCase)
        post_id = uuid4()

        response = await list_comments.execute(
            RequestContext(caller_id=UserId(uuid4())),
            ListCommentsRequest(post_id=post_id),
        )

        assert response.post_id == str(post_id)
        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_list_comments_returns_all_live(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        context = RequestContext(caller_id=UserId(uuid4()))
        post_id = uuid4()
        for body in ("one", "two"):
            await create.execute(context, CreateCommentRequest(post_id=post_id, body=body))

        response = await list_comments.execute(
            context, ListCommentsRequest(post_id=post_id)
        )

        assert [c.body for c in response.comments] == ["one", "two"]
        assert response.total == 2


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_get_comment_reports_viewer_reaction(self, unit_env):
        """my_reaction is computed for whoever is asking."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        like = await unit_env.get(LikeCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)
        author = RequestContext(caller_id=UserId(uuid4()))
        fan = RequestContext(caller_id=UserId(uuid4()))
        post_id = uuid4()
        created = await create.execute(
            author, CreateCommentRequest(post_id=post_id, body="Like me")
        )
        comment_id = created.comment.comment_id
        await like.execute(fan, ReactionRequest(post_id=post_id, comment_id=comment_id))
        request = GetCommentRequest(post_id=post_id, comment_id=comment_id)

        # Act
        as_fan = await get.execute(fan, request)
        as_author = await get.execute(author, request)

        # Assert
        assert as_fan.comment.my_reaction is Reaction.LIKED
        assert as_author.comment.my_reaction is Reaction.NONE
        assert as_author.comment.likes == [str(fan.caller_id)]
        assert as_author.comment.like_count == 1
