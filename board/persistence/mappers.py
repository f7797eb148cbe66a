"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Comment, Counter
from board.domain.value import CommentId, CounterName


def _to_uuid(value: UUID | str) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_to_uuid(row["id"])),
        parent_id=CommentId(_to_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        name=row["name"],
        email=row["email"],
        content=row["content"],
        created_at=row["created_at"],
        ip=row["ip"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_counter(row: Dict[str, Any]) -> Counter:
    """Convert database row to Counter domain model."""
    return Counter(name=CounterName(row["name"]), value=row["value"])
