"""Domain value objects for commentary."""

from commentary.domain.value.identifiers import CommentId, PostId, UserId
from commentary.domain.value.types import CommentContent, CommentUpdate, Reaction

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "CommentContent",
    "CommentUpdate",
    "Reaction",
]
