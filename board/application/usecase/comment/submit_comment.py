"""Submit comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService, CommentSubmission


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    name: str | None = None
    email: str | None = None
    content: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies
    website: str | None = None  # Honeypot field
    ip: str  # Submitter address resolved by the interface layer


class SubmitCommentResponse(BaseModel):
    """Submit comment response.

    ``message`` is omitted for honeypot submissions so that a bot sees a
    bare success.
    """

    success: bool
    message: str | None = None


class SubmitCommentUseCase(BaseUseCase):
    """Use case for submitting a new comment or reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Args:
            request: Submission fields and submitter IP

        Returns:
            Success response; also returned, without a message, when the
            honeypot discarded the submission

        Raises:
            ValidationError: If fields are missing, too long or malformed
            RateLimitError: If the submitter exceeded the rate limit
            StorageError: If the comment could not be written
        """
        submission = CommentSubmission(
            name=request.name,
            email=request.email,
            content=request.content,
            parent_id=request.parent_id,
            website=request.website,
        )
        comment = await self.comment_service.submit_comment(submission, ip=request.ip)

        if comment is None:
            return SubmitCommentResponse(success=True)
        return SubmitCommentResponse(success=True, message="Comment saved")
