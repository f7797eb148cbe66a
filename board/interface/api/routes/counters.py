"""Counter routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from board.application.usecase.counter import (
    CounterRequest,
    CounterResponse,
    GetCounterUseCase,
    IncrementCounterUseCase,
)
from board.domain.error import StorageError, ValidationError
from board.interface.api.responses import failure_response

router = APIRouter(prefix="/counters", tags=["counters"], route_class=DishkaRoute)


@router.post("/{name}", response_model=CounterResponse)
async def increment_counter(
    name: str,
    increment_counter_use_case: FromDishka[IncrementCounterUseCase],
) -> CounterResponse | JSONResponse:
    """Increment a named counter and return its new value.

    The counter is created on first use.
    """
    try:
        return await increment_counter_use_case.execute(CounterRequest(name=name))
    except ValidationError as e:
        return failure_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        logfire.error("Counter increment failed", name=name, error=str(e))
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update counter"
        )


@router.get("/{name}", response_model=CounterResponse)
async def get_counter(
    name: str,
    get_counter_use_case: FromDishka[GetCounterUseCase],
) -> CounterResponse | JSONResponse:
    """Read a named counter; unknown counters read as zero."""
    try:
        return await get_counter_use_case.execute(CounterRequest(name=name))
    except ValidationError as e:
        return failure_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageError as e:
        logfire.error("Counter read failed", name=name, error=str(e))
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to read counter"
        )
