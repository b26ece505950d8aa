"""Unit tests for the reply use cases."""

from uuid import uuid4

import pytest

from commentary.application.context import RequestContext
from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from commentary.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)
from commentary.domain.error import NotAuthorizedError, NotFoundError
from commentary.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_parent(unit_env, context, post_id):
    create = await unit_env.get(CreateCommentUseCase)
    response = await create.execute(
        context, CreateCommentRequest(post_id=post_id, body="Parent")
    )
    return response.comment


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_create_reply_then_list(self, unit_env):
        # Arrange
        create_reply = await unit_env.get(CreateReplyUseCase)
        list_replies = await unit_env.get(ListRepliesUseCase)
        author = RequestContext(caller_id=UserId(uuid4()))
        replier = RequestContext(caller_id=UserId(uuid4()))
        post_id = uuid4()
        parent = await _create_parent(unit_env, author, post_id)

        # Act
        created = await create_reply.execute(
            replier,
            CreateReplyRequest(
                post_id=post_id, parent_id=parent.comment_id, body="Reply"
            ),
        )
        listed = await list_replies.execute(
            author, ListRepliesRequest(post_id=post_id, parent_id=parent.comment_id)
        )

        # Assert
        assert created.reply.parent_id == parent.comment_id
        assert created.reply.author_id == str(replier.caller_id)
        assert listed.parent_id == parent.comment_id
        assert [r.comment_id for r in listed.replies] == [created.reply.comment_id]
        assert listed.total == 1

    @pytest.mark.asyncio
    async def test_list_replies_none_raises_not_found(self, unit_env):
        list_replies = await unit_env.get(ListRepliesUseCase)
        context = RequestContext(caller_id=UserId(uuid4()))
        post_id = uuid4()
        parent = await _create_parent(unit_env, context, post_id)

        with pytest.raises(NotFoundError):
            await list_replies.execute(
                context,
                ListRepliesRequest(post_id=post_id, parent_id=parent.comment_id),
            )


class TestDeleteReplyUseCase:
    """Tests for DeleteReplyUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reply_by_author(self, unit_env):
        create_reply = await unit_env.get(CreateReplyUseCase)
        delete_reply = await unit_env.get(DeleteReplyUseCase)
        context = RequestContext(caller_id=UserId(uuid4()))
        post_id = uuid4()
        parent = await _create_parent(unit_env, context, post_id)
        created = await create_reply.execute(
            context,
            CreateReplyRequest(
                post_id=post_id, parent_id=parent.comment_id, body="Reply"
            ),
        )

        response = await delete_reply.execute(
            context,
            DeleteReplyRequest(
                post_id=post_id,
                parent_id=parent.comment_id,
                reply_id=created.reply.comment_id,
            ),
        )

        assert response.reply_id == created.reply.comment_id
        assert response.parent_id == parent.comment_id
        assert response.deleted is True

    @pytest.mark.asyncio
    async def test_delete_reply_by_stranger_leaves_reply_unlinked(self, unit_env):
        """The rejected delete still removes the reply from the parent."""
        # Arrange
        create_reply = await unit_env.get(CreateReplyUseCase)
        delete_reply = await unit_env.get(DeleteReplyUseCase)
        list_replies = await unit_env.get(ListRepliesUseCase)
        author = RequestContext(caller_id=UserId(uuid4()))
        stranger = RequestContext(caller_id=UserId(uuid4()))
        post_id = uuid4()
        parent = await _create_parent(unit_env, author, post_id)
        created = await create_reply.execute(
            author,
            CreateReplyRequest(
                post_id=post_id, parent_id=parent.comment_id, body="Reply"
            ),
        )

        # Act
        with pytest.raises(NotAuthorizedError):
            await delete_reply.execute(
                stranger,
                DeleteReplyRequest(
                    post_id=post_id,
                    parent_id=parent.comment_id,
                    reply_id=created.reply.comment_id,
                ),
            )

        # Assert
        with pytest.raises(NotFoundError):
            await list_replies.execute(
                author,
                ListRepliesRequest(post_id=post_id, parent_id=parent.comment_id),
            )
