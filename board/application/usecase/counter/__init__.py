"""Counter use cases."""

from .increment_counter import (
    CounterRequest,
    CounterResponse,
    GetCounterUseCase,
    IncrementCounterUseCase,
)

__all__ = [
    "CounterRequest",
    "CounterResponse",
    "GetCounterUseCase",
    "IncrementCounterUseCase",
]
