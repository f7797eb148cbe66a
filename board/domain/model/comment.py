"""Comment entity.

Comments are stored flat; each one optionally references a parent comment.
The threaded view is rebuilt from the flat set on every read.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity.

    Text fields hold HTML-escaped content, so their stored length may exceed
    the submission limits.

    The parent reference is not checked for existence when the comment is
    written; unresolved parents are handled when the tree is assembled.
    """

    id: CommentId
    parent_id: Optional[CommentId] = None
    name: str
    email: str
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    ip: str  # Kept for rate limiting and audit, never returned to clients
