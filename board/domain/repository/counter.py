"""Counter repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.counter import Counter
from board.domain.value import CounterName


class CounterRepository(ABC):
    """Repository for named counters."""

    @abstractmethod
    async def find_by_name(self, name: CounterName) -> Optional[Counter]:
        """Find a counter by name.

        Args:
            name: Counter name

        Returns:
            The counter if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def increment(self, name: CounterName) -> Counter:
        """Atomically increment a counter and return its new state.

        The counter is created with value 1 if it does not exist yet.

        Args:
            name: Counter name

        Returns:
            The counter after the increment
        """
        pass
