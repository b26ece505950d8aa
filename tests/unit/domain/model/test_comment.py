"""Unit tests for the Comment entity."""

from uuid import uuid4

import pytest

from commentary.domain.error import AlreadyDeletedError, ConflictError
from commentary.domain.value import CommentId, CommentUpdate, Reaction, UserId
from tests.conftest import make_comment


class TestNew:
    """Tests for Comment.new."""

    def test_new_comment_starts_empty(self):
        """Fresh comments have no replies, no reactions and version 0."""
        comment = make_comment(body="Hello", summary="greeting")

        assert comment.body == "Hello"
        assert comment.summary == "greeting"
        assert comment.children == ()
        assert comment.detached_children == ()
        assert comment.likes == frozenset()
        assert comment.dislikes == frozenset()
        assert comment.deleted is False
        assert comment.version == 0

    def test_new_reply_keeps_parent(self):
        parent_id = CommentId(uuid4())

        reply = make_comment(parent_id=parent_id)

        assert reply.parent_id == parent_id


class TestEdited:
    """Tests for content edits."""

    def test_edited_changes_only_supplied_fields(self):
        comment = make_comment(body="Original", summary="Keep me")

        edited = comment.edited(CommentUpdate(body="Changed"))

        assert edited.body == "Changed"
        assert edited.summary == "Keep me"
        assert edited.author_id == comment.author_id
        assert edited.updated_at >= comment.updated_at
        # Original instance is untouched
        assert comment.body == "Original"

    def test_edited_on_tombstone_raises(self):
        comment = make_comment().tombstoned()

        with pytest.raises(AlreadyDeletedError):
            comment.edited(CommentUpdate(body="Back from the dead"))


class TestTombstoned:
    """Tests for logical deletion."""

    def test_tombstone_clears_content_and_detaches_children(self):
        """Tombstoning keeps identity but moves replies to detached_children."""
        child_a = CommentId(uuid4())
        child_b = CommentId(uuid4())
        comment = make_comment(body="Body", summary="Summary")
        comment = comment.with_child(child_a).with_child(child_b)

        deleted = comment.tombstoned()

        assert deleted.deleted is True
        assert deleted.body == ""
        assert deleted.summary == ""
        assert deleted.children == ()
        assert deleted.detached_children == (child_a, child_b)
        assert deleted.id == comment.id
        assert deleted.post_id == comment.post_id
        assert deleted.author_id == comment.author_id

    def test_tombstone_twice_raises(self):
        deleted = make_comment().tombstoned()

        with pytest.raises(AlreadyDeletedError):
            deleted.tombstoned()


class TestChildren:
    """Tests for reply list maintenance."""

    def test_with_child_appends_in_order(self):
        first = CommentId(uuid4())
        second = CommentId(uuid4())

        comment = make_comment().with_child(first).with_child(second)

        assert comment.children == (first, second)
        assert comment.has_child(first)

    def test_with_child_rejects_duplicate(self):
        child = CommentId(uuid4())
        comment = make_comment().with_child(child)

        with pytest.raises(ConflictError):
            comment.with_child(child)

    def test_without_child_removes_only_that_child(self):
        first = CommentId(uuid4())
        second = CommentId(uuid4())
        comment = make_comment().with_child(first).with_child(second)

        comment = comment.without_child(first)

        assert comment.children == (second,)
        assert not comment.has_child(first)

    def test_with_child_on_tombstone_raises(self):
        deleted = make_comment().tombstoned()

        with pytest.raises(AlreadyDeletedError):
            deleted.with_child(CommentId(uuid4()))


class TestReactions:
    """Tests for reaction state transitions."""

    def test_reaction_of_unknown_user_is_none(self):
        assert make_comment().reaction_of(UserId(uuid4())) is Reaction.NONE

    def test_switching_reaction_keeps_sets_disjoint(self):
        """Moving from liked to disliked removes the like."""
        user_id = UserId(uuid4())
        comment = make_comment().with_reaction(user_id, Reaction.LIKED)

        comment = comment.with_reaction(user_id, Reaction.DISLIKED)

        assert user_id not in comment.likes
        assert user_id in comment.dislikes
        assert comment.reaction_of(user_id) is Reaction.DISLIKED

    def test_reaction_none_clears_both_sets(self):
        user_id = UserId(uuid4())
        comment = make_comment().with_reaction(user_id, Reaction.LIKED)

        comment = comment.with_reaction(user_id, Reaction.NONE)

        assert comment.likes == frozenset()
        assert comment.dislikes == frozenset()

    def test_other_users_reactions_untouched(self):
        alice = UserId(uuid4())
        bob = UserId(uuid4())
        comment = make_comment().with_reaction(alice, Reaction.LIKED)

        comment = comment.with_reaction(bob, Reaction.DISLIKED)

        assert comment.likes == frozenset({alice})
        assert comment.dislikes == frozenset({bob})

    def test_reaction_on_tombstone_raises(self):
        deleted = make_comment().tombstoned()

        with pytest.raises(AlreadyDeletedError):
            deleted.with_reaction(UserId(uuid4()), Reaction.LIKED)
