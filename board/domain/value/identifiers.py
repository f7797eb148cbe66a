"""Strongly typed identifiers for comment board entities."""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
