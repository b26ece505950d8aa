"""Comment payload shared by comment, reply and reaction responses."""

from datetime import datetime

from pydantic import BaseModel

from commentary.domain.model import Comment
from commentary.domain.value import Reaction, UserId


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    post_id: str
    author_id: str
    parent_id: str | None
    body: str
    summary: str
    children: list[str]
    likes: list[str]
    dislikes: list[str]
    like_count: int
    dislike_count: int
    deleted: bool
    created_at: datetime
    updated_at: datetime
    my_reaction: Reaction  # Reaction of the caller who asked

    @classmethod
    def from_comment(cls, comment: Comment, viewer_id: UserId) -> "CommentItem":
        """Build the response item for a comment as seen by ``viewer_id``."""
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            body=comment.body,
            summary=comment.summary,
            children=[str(cid) for cid in comment.children],
            # Sets have no order; sort for stable payloads
            likes=sorted(str(uid) for uid in comment.likes),
            dislikes=sorted(str(uid) for uid in comment.dislikes),
            like_count=len(comment.likes),
            dislike_count=len(comment.dislikes),
            deleted=comment.deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            my_reaction=comment.reaction_of(viewer_id),
        )
