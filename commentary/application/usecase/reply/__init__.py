"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyResponse, DeleteReplyUseCase
from .list_replies import ListRepliesRequest, ListRepliesResponse, ListRepliesUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyResponse",
    "DeleteReplyUseCase",
    "ListRepliesRequest",
    "ListRepliesResponse",
    "ListRepliesUseCase",
]
