"""Comment entity.

Comments are threaded discussions on posts. A comment keeps an explicit,
ordered list of its direct replies and two disjoint sets of callers who
reacted to it. Deleting a comment tombstones it: content is cleared but the
document stays so replies keep a valid parent reference.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.error import AlreadyDeletedError, ConflictError
from commentary.domain.model.common import DomainModel
from commentary.domain.value import (
    CommentContent,
    CommentId,
    CommentUpdate,
    PostId,
    Reaction,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - children: Live replies, in creation order, each listed once
    - detached_children: Replies that were attached when this comment was
      tombstoned (write-once)

    Transitions return a new instance; persistence is the caller's job.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    parent_id: Optional[CommentId] = None
    body: str = ""
    summary: str = ""
    children: tuple[CommentId, ...] = ()
    detached_children: tuple[CommentId, ...] = ()
    likes: frozenset[UserId] = frozenset()
    dislikes: frozenset[UserId] = frozenset()
    deleted: bool = False
    version: int = Field(default=0, ge=0)  # Owned by the repository
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def new(
        cls,
        comment_id: CommentId,
        post_id: PostId,
        author_id: UserId,
        content: CommentContent,
        parent_id: CommentId | None = None,
    ) -> "Comment":
        """Build a fresh comment or reply."""
        now = datetime.now()
        return cls(
            id=comment_id,
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
            body=content.body,
            summary=content.summary,
            created_at=now,
            updated_at=now,
        )

    def _ensure_live(self) -> None:
        if self.deleted:
            raise AlreadyDeletedError("comment", str(self.id))

    # Content

    def edited(self, update: CommentUpdate) -> "Comment":
        """Apply an allow-listed content update."""
        self._ensure_live()
        return self.revised(**update.changes())

    def tombstoned(self) -> "Comment":
        """Logically delete the comment.

        Clears content and moves the live children into ``detached_children``.
        Identity and structural links (id, post, author, parent) survive.
        """
        self._ensure_live()
        return self.revised(
            deleted=True,
            detached_children=tuple(self.children),
            children=(),
            body="",
            summary="",
        )

    # Tree

    def has_child(self, child_id: CommentId) -> bool:
        return child_id in self.children

    def with_child(self, child_id: CommentId) -> "Comment":
        """Append a reply to the live children."""
        self._ensure_live()
        if self.has_child(child_id):
            raise ConflictError(f"Comment {child_id} is already a reply to {self.id}")
        return self.revised(children=(*self.children, child_id))

    def without_child(self, child_id: CommentId) -> "Comment":
        """Drop a reply from the live children."""
        self._ensure_live()
        return self.revised(
            children=tuple(cid for cid in self.children if cid != child_id)
        )

    # Reactions

    def reaction_of(self, user_id: UserId) -> Reaction:
        """Current reaction state of a caller on this comment."""
        if user_id in self.likes:
            return Reaction.LIKED
        if user_id in self.dislikes:
            return Reaction.DISLIKED
        return Reaction.NONE

    def with_reaction(self, user_id: UserId, reaction: Reaction) -> "Comment":
        """Move a caller into the given reaction state.

        Both sets are rewritten together, so a caller can never be observed
        in likes and dislikes at the same time.
        """
        self._ensure_live()
        likes = self.likes - {user_id}
        dislikes = self.dislikes - {user_id}
        if reaction is Reaction.LIKED:
            likes = likes | {user_id}
        elif reaction is Reaction.DISLIKED:
            dislikes = dislikes | {user_id}
        return self.revised(likes=frozenset(likes), dislikes=frozenset(dislikes))
