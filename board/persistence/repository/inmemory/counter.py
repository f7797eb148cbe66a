"""In-memory counter repository for testing."""

from typing import Optional

from board.domain.model.counter import Counter
from board.domain.repository.counter import CounterRepository
from board.domain.value import CounterName


class InMemoryCounterRepository(CounterRepository):
    """In-memory implementation of CounterRepository for testing."""

    def __init__(self) -> None:
        self._counters: dict[str, Counter] = {}

    async def find_by_name(self, name: CounterName) -> Optional[Counter]:
        """Find a counter by name."""
        return self._counters.get(name.root)

    async def increment(self, name: CounterName) -> Counter:
        """Increment a counter, creating it at 1 on first use."""
        current = self._counters.get(name.root)
        counter = Counter(name=name, value=(current.value if current else 0) + 1)
        self._counters[name.root] = counter
        return counter
