"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentSubmission
from .counter_service import CounterService
from .rate_limiter import RateLimiter, SlidingWindowRateLimiter
from .thread_service import (
    CommentNode,
    CommentPage,
    ThreadService,
    build_comment_tree,
    paginate_threads,
)

__all__ = [
    "CommentNode",
    "CommentPage",
    "CommentService",
    "CommentSubmission",
    "CounterService",
    "RateLimiter",
    "Service",
    "SlidingWindowRateLimiter",
    "ThreadService",
    "build_comment_tree",
    "paginate_threads",
]
