"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.

Reaction sets are frozensets in the domain and arrays in the database. They
are sorted on the way out so writes are deterministic; order is not read
back as meaningful.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from commentary.domain.model import Comment
from commentary.domain.value import CommentId, PostId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _id_set_to_list(ids: Iterable[UUID]) -> list[UUID]:
    return sorted(ids, key=str)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        body=row.get("body") or "",
        summary=row.get("summary") or "",
        children=tuple(CommentId(_uuid(c)) for c in row.get("children") or ()),
        detached_children=tuple(
            CommentId(_uuid(c)) for c in row.get("detached_children") or ()
        ),
        likes=frozenset(UserId(_uuid(u)) for u in row.get("likes") or ()),
        dislikes=frozenset(UserId(_uuid(u)) for u in row.get("dislikes") or ()),
        deleted=bool(row.get("deleted", False)),
        version=row.get("version", 0),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["children"] = list(comment.children)
    data["detached_children"] = list(comment.detached_children)
    data["likes"] = _id_set_to_list(comment.likes)
    data["dislikes"] = _id_set_to_list(comment.dislikes)
    return data
