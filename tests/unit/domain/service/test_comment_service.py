"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from board.config import SubmissionSettings
from board.domain.error import RateLimitError, ValidationError
from board.domain.repository import CommentRepository
from board.domain.service import (
    CommentService,
    CommentSubmission,
    SlidingWindowRateLimiter,
)
from board.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import FakeClock
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence
unit_env = create_env_fixture()

IP = "198.51.100.20"


def valid_submission(**overrides) -> CommentSubmission:
    fields = {"name": "Ada", "email": "ada@example.com", "content": "Hello board"}
    fields.update(overrides)
    return CommentSubmission(**fields)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def comment_repo():
    return InMemoryCommentRepository()


@pytest.fixture
def comment_service(comment_repo, clock):
    limiter = SlidingWindowRateLimiter(limit=5, window_seconds=60, clock=clock)
    return CommentService(
        comment_repository=comment_repo,
        rate_limiter=limiter,
        submission_settings=SubmissionSettings(),
    )


class TestSubmitComment:
    """Tests for the accepted path of submit_comment."""

    @pytest.mark.asyncio
    async def test_valid_submission_is_stored(self, unit_env):
        """Comment service from the container stores accepted comments."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        result = await comment_service.submit_comment(valid_submission(), ip=IP)

        assert result is not None
        assert result.parent_id is None
        assert result.ip == IP
        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_fields_are_html_escaped(self, comment_service):
        result = await comment_service.submit_comment(
            valid_submission(
                name="<b>Ada</b>",
                email="a&b@example.com",
                content="<script>alert('x')</script>",
            ),
            ip=IP,
        )

        assert result.name == "&lt;b&gt;Ada&lt;/b&gt;"
        assert result.email == "a&amp;b@example.com"
        assert result.content == "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;"

    @pytest.mark.asyncio
    async def test_whitespace_is_preserved(self, comment_service):
        result = await comment_service.submit_comment(
            valid_submission(content="  spaced  out\n"), ip=IP
        )

        assert result.content == "  spaced  out\n"

    @pytest.mark.asyncio
    async def test_reply_keeps_parent_reference(self, comment_service):
        parent_id = uuid4()

        result = await comment_service.submit_comment(
            valid_submission(parent_id=str(parent_id)), ip=IP
        )

        assert result.parent_id == parent_id

    @pytest.mark.asyncio
    async def test_unknown_parent_is_accepted(self, comment_service, comment_repo):
        """Parent existence is not checked on write."""
        result = await comment_service.submit_comment(
            valid_submission(parent_id=str(uuid4())), ip=IP
        )

        assert await comment_repo.count() == 1
        assert await comment_repo.find_by_id(result.parent_id) is None

    @pytest.mark.asyncio
    async def test_fields_at_limit_are_accepted(self, comment_service):
        result = await comment_service.submit_comment(
            valid_submission(name="n" * 50, email="e" * 50, content="c" * 500),
            ip=IP,
        )

        assert result is not None


class TestHoneypot:
    """Tests for the honeypot field."""

    @pytest.mark.asyncio
    async def test_filled_honeypot_stores_nothing(self, comment_service, comment_repo):
        result = await comment_service.submit_comment(
            valid_submission(website="http://spam.example"), ip=IP
        )

        assert result is None
        assert await comment_repo.count() == 0

    @pytest.mark.asyncio
    async def test_honeypot_wins_over_missing_fields(self, comment_service):
        result = await comment_service.submit_comment(
            CommentSubmission(website="x"), ip=IP
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_empty_honeypot_is_ignored(self, comment_service):
        result = await comment_service.submit_comment(
            valid_submission(website=""), ip=IP
        )

        assert result is not None

    @pytest.mark.asyncio
    async def test_honeypot_does_not_consume_rate_limit(self, comment_service):
        for _ in range(10):
            await comment_service.submit_comment(valid_submission(website="x"), ip=IP)

        assert comment_service.rate_limiter.check(IP)


class TestValidation:
    """Tests for rejected submissions."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "email", "content"])
    async def test_missing_field_is_rejected(self, comment_service, missing):
        with pytest.raises(ValidationError, match="Missing fields"):
            await comment_service.submit_comment(
                valid_submission(**{missing: None}), ip=IP
            )

    @pytest.mark.asyncio
    async def test_empty_content_is_rejected(self, comment_service):
        with pytest.raises(ValidationError, match="Missing fields"):
            await comment_service.submit_comment(valid_submission(content=""), ip=IP)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,length", [("name", 51), ("email", 51), ("content", 501)]
    )
    async def test_too_long_field_is_rejected(self, comment_service, field, length):
        with pytest.raises(ValidationError, match="Field too long"):
            await comment_service.submit_comment(
                valid_submission(**{field: "x" * length}), ip=IP
            )

    @pytest.mark.asyncio
    async def test_missing_check_runs_before_length_check(self, comment_service):
        with pytest.raises(ValidationError, match="Missing fields"):
            await comment_service.submit_comment(
                CommentSubmission(name="x" * 100, email="a@b.c"), ip=IP
            )

    @pytest.mark.asyncio
    async def test_invalid_parent_reference_is_rejected(self, comment_service):
        with pytest.raises(ValidationError, match="Invalid parentId"):
            await comment_service.submit_comment(
                valid_submission(parent_id="not-a-uuid"), ip=IP
            )

    @pytest.mark.asyncio
    async def test_rejected_submissions_do_not_consume_rate_limit(
        self, comment_service
    ):
        for _ in range(10):
            with pytest.raises(ValidationError):
                await comment_service.submit_comment(
                    valid_submission(content=None), ip=IP
                )

        for _ in range(5):
            assert await comment_service.submit_comment(valid_submission(), ip=IP)


class TestRateLimit:
    """Tests for the per-IP submission limit."""

    @pytest.mark.asyncio
    async def test_sixth_submission_in_window_is_rejected(
        self, comment_service, comment_repo
    ):
        for _ in range(5):
            await comment_service.submit_comment(valid_submission(), ip=IP)

        with pytest.raises(RateLimitError):
            await comment_service.submit_comment(valid_submission(), ip=IP)

        assert await comment_repo.count() == 5

    @pytest.mark.asyncio
    async def test_submissions_succeed_after_window(self, comment_service, clock):
        for _ in range(5):
            await comment_service.submit_comment(valid_submission(), ip=IP)

        clock.advance(60)

        assert await comment_service.submit_comment(valid_submission(), ip=IP)

    @pytest.mark.asyncio
    async def test_other_ips_are_not_affected(self, comment_service):
        for _ in range(5):
            await comment_service.submit_comment(valid_submission(), ip=IP)

        assert await comment_service.submit_comment(
            valid_submission(), ip="192.0.2.99"
        )

    @pytest.mark.asyncio
    async def test_rate_limit_checked_after_field_validation(self, comment_service):
        """A throttled client still gets field errors first."""
        for _ in range(5):
            await comment_service.submit_comment(valid_submission(), ip=IP)

        with pytest.raises(ValidationError):
            await comment_service.submit_comment(valid_submission(email=""), ip=IP)
