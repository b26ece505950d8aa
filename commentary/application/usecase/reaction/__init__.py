"""Reaction use cases."""

from .react import (
    DislikeCommentUseCase,
    LikeCommentUseCase,
    ReactionRequest,
    ReactionResponse,
)
from .remove_reaction import UndislikeCommentUseCase, UnlikeCommentUseCase

__all__ = [
    "DislikeCommentUseCase",
    "LikeCommentUseCase",
    "ReactionRequest",
    "ReactionResponse",
    "UndislikeCommentUseCase",
    "UnlikeCommentUseCase",
]
