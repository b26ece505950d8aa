"""Domain value objects for commentary.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for comment content and reactions.
"""

from enum import Enum

from pydantic import Field, model_validator

from commentary.domain.value.common import ValueObject

BODY_MAX_LENGTH = 10000
SUMMARY_MAX_LENGTH = 500


class Reaction(str, Enum):
    """A caller's reaction state on a single comment.

    A caller is in exactly one of these states per comment, which is what
    keeps likes and dislikes mutually exclusive.
    """

    NONE = "none"
    LIKED = "liked"
    DISLIKED = "disliked"


class CommentContent(ValueObject):
    """Free-text content supplied when a comment or reply is created."""

    body: str = Field(min_length=1, max_length=BODY_MAX_LENGTH)
    summary: str = Field(default="", max_length=SUMMARY_MAX_LENGTH)


class CommentUpdate(ValueObject):
    """Allow-listed partial update of a comment's content.

    Only ``body`` and ``summary`` can be written. Unknown keys are rejected so
    an update can never reach ``author_id``, ``post_id``, ``parent_id`` or
    ``deleted``.
    """

    body: str | None = Field(default=None, min_length=1, max_length=BODY_MAX_LENGTH)
    summary: str | None = Field(default=None, max_length=SUMMARY_MAX_LENGTH)

    @model_validator(mode="after")
    def require_one_field(self) -> "CommentUpdate":
        """Reject updates that change nothing."""
        if self.body is None and self.summary is None:
            raise ValueError("Update must set at least one of body or summary")
        return self

    def changes(self) -> dict[str, str]:
        """Return only the fields that were supplied."""
        return self.model_dump(exclude_none=True)
