"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.counter import PostgresCounterRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCounterRepository",
]
