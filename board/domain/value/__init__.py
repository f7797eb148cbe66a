"""Domain value objects for the comment board."""

from board.domain.value.identifiers import CommentId
from board.domain.value.types import CounterName, SortOrder

__all__ = [
    # Identifiers
    "CommentId",
    # Types
    "CounterName",
    "SortOrder",
]
