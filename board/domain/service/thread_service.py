"""Thread assembly and pagination domain service."""

import math
from dataclasses import dataclass, field

import logfire

from board.config import CommentSettings
from board.domain.model.comment import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, SortOrder

from .base import Service


@dataclass
class CommentNode:
    """A comment and its direct replies in the threaded view.

    Built fresh for every read; nothing about the tree is persisted.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


@dataclass
class CommentPage:
    """One page of root threads plus pagination metadata."""

    comments: list[CommentNode]
    current_page: int
    total_pages: int
    total_items: int


def build_comment_tree(comments: list[Comment]) -> list[CommentNode]:
    """Rebuild the reply forest from a flat list of comments.

    Algorithm:
    1. Index every comment by id (single pass)
    2. Attach each comment to its parent's children, or make it a root when
       it has no parent or its parent is not in the list

    Siblings and roots keep the order of ``comments``; nothing is re-sorted.

    Args:
        comments: Flat comments in display order

    Returns:
        Root nodes, each carrying its full reply subtree
    """
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in comments
    }

    roots: list[CommentNode] = []
    for comment in comments:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)

    return roots


def paginate_threads(roots: list[CommentNode], page: int, limit: int) -> CommentPage:
    """Slice one page out of the root threads.

    A thread is never split across pages and replies do not count toward
    ``limit``. Pages past the end are empty rather than an error, and
    ``page`` or ``limit`` below 1 are treated as 1.

    Args:
        roots: All root threads in display order
        page: 1-based page number
        limit: Roots per page

    Returns:
        The requested page
    """
    page = max(page, 1)
    limit = max(limit, 1)

    total_items = len(roots)
    start = (page - 1) * limit

    return CommentPage(
        comments=roots[start : start + limit],
        current_page=page,
        total_pages=math.ceil(total_items / limit),
        total_items=total_items,
    )


class ThreadService(Service):
    """Domain service serving the threaded, paginated comment view."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            comment_settings: Ordering and page size configuration
        """
        self.comment_repository = comment_repository
        self.settings = comment_settings

    @property
    def sort_order(self) -> SortOrder:
        """Configured ordering for roots and siblings."""
        return SortOrder(self.settings.sort_order)

    async def get_comment_page(self, page: int, limit: int) -> CommentPage:
        """Fetch every comment, assemble the forest and return one page.

        ``limit`` is capped at the configured maximum page size.

        Args:
            page: 1-based page number
            limit: Requested roots per page

        Returns:
            Page of root threads with pagination metadata

        Raises:
            StorageError: If comments could not be read
        """
        limit = min(limit, self.settings.max_page_size)

        with logfire.span(
            "thread_service.get_comment_page",
            page=page,
            limit=limit,
            order=self.sort_order.value,
        ):
            comments = await self.comment_repository.find_all(order=self.sort_order)
            roots = build_comment_tree(comments)
            result = paginate_threads(roots, page=page, limit=limit)

            logfire.info(
                "Comment page assembled",
                comment_count=len(comments),
                root_count=result.total_items,
                page=page,
                total_pages=result.total_pages,
            )
            return result
