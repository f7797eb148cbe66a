"""Comment use cases."""

from .get_comments import (
    CommentNodeResponse,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

__all__ = [
    "CommentNodeResponse",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
]
