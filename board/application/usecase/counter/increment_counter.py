"""Counter use cases."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CounterService


class CounterRequest(BaseModel):
    """Counter request."""

    name: str


class CounterResponse(BaseModel):
    """Counter state."""

    name: str
    value: int


class IncrementCounterUseCase(BaseUseCase):
    """Use case for bumping a named counter and reading the new value."""

    def __init__(self, counter_service: CounterService) -> None:
        self.counter_service = counter_service

    async def execute(self, request: CounterRequest) -> CounterResponse:
        """Increment the counter and return its new value.

        Raises:
            ValidationError: If the counter name is invalid
            StorageError: If the counter could not be updated
        """
        counter = await self.counter_service.increment(request.name)
        return CounterResponse(name=counter.name.root, value=counter.value)


class GetCounterUseCase(BaseUseCase):
    """Use case for reading a named counter."""

    def __init__(self, counter_service: CounterService) -> None:
        self.counter_service = counter_service

    async def execute(self, request: CounterRequest) -> CounterResponse:
        """Return the counter's current value (0 when it does not exist)."""
        counter = await self.counter_service.get(request.name)
        return CounterResponse(name=counter.name.root, value=counter.value)
