"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from board.domain.model import Comment
from board.domain.value import CommentId

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_comment(
    *,
    parent: Comment | CommentId | None = None,
    minutes: int = 0,
    content: str = "A comment",
    ip: str = "203.0.113.7",
) -> Comment:
    """Helper function to build stored comments for tests.

    Args:
        parent: Parent comment or bare parent ID (need not exist)
        minutes: Offset from BASE_TIME, controls ordering
        content: Comment body
        ip: Submitter address

    Returns:
        Comment domain model
    """
    parent_id = parent.id if isinstance(parent, Comment) else parent
    return Comment(
        id=CommentId(uuid4()),
        parent_id=parent_id,
        name="Tester",
        email="tester@example.com",
        content=content,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        ip=ip,
    )


class FakeClock:
    """Manually advanced monotonic clock for rate limiter tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
