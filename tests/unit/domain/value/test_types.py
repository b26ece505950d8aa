"""Unit tests for comment value objects."""

import pytest
from pydantic import ValidationError

from commentary.domain.value import CommentContent, CommentUpdate
from commentary.domain.value.types import BODY_MAX_LENGTH, SUMMARY_MAX_LENGTH


class TestCommentContent:
    def test_summary_defaults_to_empty(self):
        assert CommentContent(body="Hi").summary == ""

    def test_empty_body_rejected(self):
        with pytest.raises(ValidationError):
            CommentContent(body="")

    def test_overlong_body_rejected(self):
        with pytest.raises(ValidationError):
            CommentContent(body="x" * (BODY_MAX_LENGTH + 1))

    def test_overlong_summary_rejected(self):
        with pytest.raises(ValidationError):
            CommentContent(body="Hi", summary="x" * (SUMMARY_MAX_LENGTH + 1))


class TestCommentUpdate:
    def test_changes_skips_unset_fields(self):
        update = CommentUpdate(summary="New summary")

        assert update.changes() == {"summary": "New summary"}

    def test_empty_update_rejected(self):
        with pytest.raises(ValidationError, match="at least one"):
            CommentUpdate()

    @pytest.mark.parametrize(
        "field", ["author_id", "post_id", "parent_id", "deleted", "children", "likes"]
    )
    def test_structural_fields_rejected(self, field):
        """Only body and summary are writable through an update."""
        with pytest.raises(ValidationError):
            CommentUpdate.model_validate({"body": "Hi", field: "anything"})

    def test_blank_body_rejected(self):
        with pytest.raises(ValidationError):
            CommentUpdate(body="")

    def test_empty_summary_allowed(self):
        """Clearing the summary is a valid update."""
        assert CommentUpdate(summary="").changes() == {"summary": ""}
