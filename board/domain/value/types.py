"""Domain value objects for the comment board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject


class SortOrder(str, Enum):
    """Ordering of comments by creation time.

    Applies to root threads and to siblings at every level.
    """

    NEWEST = "newest"
    OLDEST = "oldest"


class CounterName(RootValueObject[str]):
    """Name of a counter document.

    Lowercase alphanumerics, hyphens and underscores, 1-64 characters.
    Examples: 'visits', 'board-views'
    """

    @field_validator("root")
    @classmethod
    def validate_counter_name(cls, v: str) -> str:
        """Validate counter name format."""
        if not re.match(r"^[a-z0-9_-]{1,64}$", v):
            raise ValueError(
                "Counter name must be 1-64 characters, lowercase alphanumeric "
                "with hyphens or underscores"
            )
        return v
