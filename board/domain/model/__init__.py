"""Domain model entities for the comment board."""

from board.domain.model.comment import Comment
from board.domain.model.counter import Counter

__all__ = [
    "Comment",
    "Counter",
]
