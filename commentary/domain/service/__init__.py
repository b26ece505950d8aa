"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityProvider, IdentityService
from .reaction_service import ReactionService
from .reply_service import ReplyService

__all__ = [
    "CommentService",
    "IdentityProvider",
    "IdentityService",
    "ReactionService",
    "ReplyService",
    "Service",
]
