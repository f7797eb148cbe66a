"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from board.config import CommentSettings
from board.domain.service import ThreadService
from board.domain.value import CommentId
from board.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


@pytest.fixture
def comment_repo():
    return InMemoryCommentRepository()


@pytest.fixture
def use_case(comment_repo):
    service = ThreadService(comment_repo, CommentSettings(sort_order="oldest"))
    return GetCommentsUseCase(service)


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_converts_tree_to_response(self, use_case, comment_repo):
        root = make_comment(minutes=0, content="root")
        reply = make_comment(parent=root, minutes=1, content="reply")
        await comment_repo.save(root)
        await comment_repo.save(reply)

        response = await use_case.execute(GetCommentsRequest(page=1, limit=15))

        assert response.total_items == 1
        assert response.total_pages == 1
        assert response.current_page == 1
        node = response.comments[0]
        assert node.id == str(root.id)
        assert node.parent_id is None
        assert node.content == "root"
        assert node.children[0].id == str(reply.id)
        assert node.children[0].parent_id == str(root.id)

    @pytest.mark.asyncio
    async def test_serialises_camel_case_without_ip(self, use_case, comment_repo):
        orphan = make_comment(parent=CommentId(uuid4()))
        await comment_repo.save(orphan)

        response = await use_case.execute(GetCommentsRequest())
        data = response.model_dump(by_alias=True)

        assert set(data) == {"comments", "currentPage", "totalPages", "totalItems"}
        node = data["comments"][0]
        assert set(node) == {
            "id",
            "parentId",
            "name",
            "email",
            "content",
            "createdAt",
            "children",
        }
        assert node["parentId"] == str(orphan.parent_id)

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, use_case, comment_repo):
        await comment_repo.save(make_comment())

        response = await use_case.execute(GetCommentsRequest(page=5, limit=15))

        assert response.comments == []
        assert response.current_page == 5
        assert response.total_pages == 1
