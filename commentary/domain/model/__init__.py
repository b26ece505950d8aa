"""Domain model entities for commentary."""

from commentary.domain.model.comment import Comment

__all__ = [
    "Comment",
]
