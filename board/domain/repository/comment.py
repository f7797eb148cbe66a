"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise
    ``StorageError`` when the underlying store fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, order: SortOrder = SortOrder.NEWEST) -> List[Comment]:
        """Find every comment on the board.

        Args:
            order: Ordering by creation time

        Returns:
            All comments, flat, in the requested order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all stored comments."""
        pass
