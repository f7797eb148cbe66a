"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .counter import InMemoryCounterRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCounterRepository",
]
