"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentContent, CommentId, PostId, UserId

# Keep spans local: nothing is sent and nothing is printed during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    post_id: PostId | None = None,
    author_id: UserId | None = None,
    body: str = "Test comment",
    summary: str = "",
    parent_id: CommentId | None = None,
) -> Comment:
    """Build an unsaved comment with fresh IDs for anything not given."""
    return Comment.new(
        comment_id=CommentId(uuid4()),
        post_id=post_id or PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        content=CommentContent(body=body, summary=summary),
        parent_id=parent_id,
    )


@pytest.fixture
def post_id() -> PostId:
    return PostId(uuid4())


@pytest.fixture
def author_id() -> UserId:
    return UserId(uuid4())


@pytest.fixture
def other_user_id() -> UserId:
    return UserId(uuid4())
