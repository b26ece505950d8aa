"""Typed identifiers.

All three are UUIDs. Users and posts are owned by other services; only
comment IDs are minted here.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
