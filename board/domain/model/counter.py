"""Named counter entity."""

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CounterName


class Counter(DomainModel):
    """A named, monotonically increasing counter (e.g. site visits)."""

    name: CounterName
    value: int = Field(default=0, ge=0)
