"""Repository interfaces for the comment board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.counter import CounterRepository

__all__ = [
    "CommentRepository",
    "CounterRepository",
]
