"""Repository interfaces for the commentary domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from commentary.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
