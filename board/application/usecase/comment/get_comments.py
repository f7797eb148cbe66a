"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentNode, ThreadService


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommentNodeResponse(CamelModel):
    """Comment node for API response.

    Recursive structure mirroring the domain tree. The submitter IP is
    deliberately absent.
    """

    id: str
    parent_id: str | None
    name: str
    email: str
    content: str
    created_at: datetime
    children: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert domain CommentNode to response model.

        Args:
            node: Domain comment node

        Returns:
            API response model with children recursively converted
        """
        comment = node.comment
        return cls(
            id=str(comment.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            name=comment.name,
            email=comment.email,
            content=comment.content,
            created_at=comment.created_at,
            children=[cls.from_domain(child) for child in node.children],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=15, ge=1)


class GetCommentsResponse(CamelModel):
    """One page of root threads."""

    comments: list[CommentNodeResponse]
    current_page: int
    total_pages: int
    total_items: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the threaded comment board one page at a time."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get comments use case.

        Args:
            thread_service: Thread assembly domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Page number and page size

        Returns:
            Root threads on the page with nested replies and pagination data

        Raises:
            StorageError: If comments could not be read
        """
        page = await self.thread_service.get_comment_page(
            page=request.page, limit=request.limit
        )

        return GetCommentsResponse(
            comments=[CommentNodeResponse.from_domain(node) for node in page.comments],
            current_page=page.current_page,
            total_pages=page.total_pages,
            total_items=page.total_items,
        )
