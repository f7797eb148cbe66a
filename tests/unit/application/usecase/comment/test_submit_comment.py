"""Unit tests for SubmitCommentUseCase."""

import pytest

from board.application.usecase.comment import (
    SubmitCommentRequest,
    SubmitCommentUseCase,
)
from board.domain.error import ValidationError
from board.domain.repository import CommentRepository
from board.domain.service import CommentService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_request(**overrides) -> SubmitCommentRequest:
    fields = {
        "name": "Grace",
        "email": "grace@example.com",
        "content": "First!",
        "ip": "192.0.2.1",
    }
    fields.update(overrides)
    return SubmitCommentRequest(**fields)


class TestSubmitCommentUseCase:
    """Tests for SubmitCommentUseCase."""

    @pytest.mark.asyncio
    async def test_saved_comment_reports_message(self, unit_env):
        use_case = SubmitCommentUseCase(await unit_env.get(CommentService))
        comment_repo = await unit_env.get(CommentRepository)

        response = await use_case.execute(make_request())

        assert response.success is True
        assert response.message == "Comment saved"
        assert await comment_repo.count() == 1

    @pytest.mark.asyncio
    async def test_honeypot_reports_bare_success(self, unit_env):
        use_case = SubmitCommentUseCase(await unit_env.get(CommentService))
        comment_repo = await unit_env.get(CommentRepository)

        response = await use_case.execute(make_request(website="http://bot"))

        assert response.success is True
        assert response.message is None
        assert await comment_repo.count() == 0

    @pytest.mark.asyncio
    async def test_validation_errors_propagate(self, unit_env):
        use_case = SubmitCommentUseCase(await unit_env.get(CommentService))

        with pytest.raises(ValidationError):
            await use_case.execute(make_request(content=None))
