"""Counter domain service."""

import logfire

from board.domain.error import ValidationError
from board.domain.model.counter import Counter
from board.domain.repository import CounterRepository
from board.domain.value import CounterName

from .base import Service


class CounterService(Service):
    """Domain service for named counters."""

    def __init__(self, counter_repository: CounterRepository) -> None:
        """Initialize counter service.

        Args:
            counter_repository: Counter repository
        """
        self.counter_repository = counter_repository

    async def increment(self, name: str) -> Counter:
        """Atomically increment a counter, creating it on first use.

        Args:
            name: Counter name

        Returns:
            The counter after the increment

        Raises:
            ValidationError: If the name is not a valid counter name
            StorageError: If the counter could not be updated
        """
        counter_name = self._parse_name(name)
        with logfire.span("counter_service.increment", name=counter_name.root):
            counter = await self.counter_repository.increment(counter_name)
            logfire.info(
                "Counter incremented", name=counter_name.root, value=counter.value
            )
            return counter

    async def get(self, name: str) -> Counter:
        """Read a counter without changing it.

        Missing counters read as zero.

        Args:
            name: Counter name

        Returns:
            The counter's current state

        Raises:
            ValidationError: If the name is not a valid counter name
            StorageError: If the counter could not be read
        """
        counter_name = self._parse_name(name)
        with logfire.span("counter_service.get", name=counter_name.root):
            counter = await self.counter_repository.find_by_name(counter_name)
            return counter or Counter(name=counter_name, value=0)

    @staticmethod
    def _parse_name(name: str) -> CounterName:
        try:
            return CounterName(name)
        except ValueError:
            raise ValidationError("Invalid counter name") from None
