"""Comment ingestion domain service."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from board.config import SubmissionSettings
from board.domain.error import RateLimitError, ValidationError
from board.domain.model.comment import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId
from board.util.html import escape_html

from .base import Service
from .rate_limiter import RateLimiter


class CommentSubmission(BaseModel):
    """Raw comment submission as received from a client.

    Fields are optional here; presence and limits are enforced by
    ``CommentService.submit_comment``.
    """

    name: str | None = None
    email: str | None = None
    content: str | None = None
    parent_id: str | None = None
    website: str | None = None  # Honeypot, hidden from humans


class CommentService(Service):
    """Domain service that validates and stores new comments."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        rate_limiter: RateLimiter,
        submission_settings: SubmissionSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            rate_limiter: Process-wide submission rate limiter
            submission_settings: Field length limits
        """
        self.comment_repository = comment_repository
        self.rate_limiter = rate_limiter
        self.settings = submission_settings

    async def submit_comment(
        self, submission: CommentSubmission, ip: str
    ) -> Comment | None:
        """Validate a submission and store it.

        Checks run in order and stop at the first failure:
        1. Honeypot filled -> silently discarded (returns None)
        2. Missing name, email or content -> ValidationError
        3. Field over its length limit -> ValidationError
        4. Unparseable parent reference -> ValidationError
        5. Too many recent submissions from ``ip`` -> RateLimitError

        Only a submission that passes every check is recorded against the
        rate limit, escaped and written.

        Args:
            submission: Raw submission fields
            ip: Submitter's network address

        Returns:
            The stored comment, or None if the honeypot caught it

        Raises:
            ValidationError: If fields are missing, too long or malformed
            RateLimitError: If ``ip`` exceeded the submission rate
            StorageError: If the comment could not be written
        """
        with logfire.span("comment_service.submit_comment", ip=ip):
            if submission.website:
                logfire.warn("Honeypot triggered, discarding submission", ip=ip)
                return None

            name, email, content = (
                submission.name,
                submission.email,
                submission.content,
            )
            if not name or not email or not content:
                logfire.info("Submission rejected: missing fields", ip=ip)
                raise ValidationError("Missing fields")

            if (
                len(name) > self.settings.max_name_length
                or len(email) > self.settings.max_email_length
                or len(content) > self.settings.max_content_length
            ):
                logfire.info(
                    "Submission rejected: field too long",
                    ip=ip,
                    name_length=len(name),
                    email_length=len(email),
                    content_length=len(content),
                )
                raise ValidationError("Field too long")

            parent_id = self._parse_parent_id(submission.parent_id)

            if not self.rate_limiter.check(ip):
                logfire.warn("Submission rejected: rate limit exceeded", ip=ip)
                raise RateLimitError(ip)
            self.rate_limiter.record(ip)

            comment = Comment(
                id=CommentId(uuid4()),
                parent_id=parent_id,
                name=escape_html(name),
                email=escape_html(email),
                content=escape_html(content),
                created_at=datetime.now(timezone.utc),
                ip=ip,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment saved",
                comment_id=str(saved.id),
                parent_id=str(parent_id) if parent_id else None,
                ip=ip,
            )
            return saved

    @staticmethod
    def _parse_parent_id(raw: str | None) -> CommentId | None:
        """Turn the submitted parent reference into a CommentId.

        Existence of the parent is not checked.
        """
        if not raw:
            return None
        try:
            return CommentId(UUID(raw))
        except ValueError:
            logfire.info("Submission rejected: invalid parent reference")
            raise ValidationError("Invalid parentId") from None
