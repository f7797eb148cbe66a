"""In-memory comment repository for testing."""

from typing import Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, SortOrder


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all(self, order: SortOrder = SortOrder.NEWEST) -> list[Comment]:
        """Find every comment ordered by creation time."""
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(
            self._comments.values(),
            key=lambda c: c.created_at,
            reverse=order == SortOrder.NEWEST,
        )

    async def save(self, comment: Comment) -> Comment:
        """Store a comment."""
        self._comments[comment.id] = comment
        return comment

    async def count(self) -> int:
        """Count all stored comments."""
        return len(self._comments)
