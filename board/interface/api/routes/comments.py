"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from board.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from board.config import Settings
from board.domain.error import RateLimitError, StorageError, ValidationError
from board.interface.api.responses import failure_response
from board.interface.error import MalformedInputError, PayloadTooLargeError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class SubmitCommentAPIRequest(BaseModel):
    """API request body for submitting a comment.

    Every field is optional here so that missing fields are reported by the
    ingestion rules rather than as a parse failure. Non-string values are
    malformed input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    email: str | None = None
    content: str | None = None
    parent_id: str | None = None
    website: str | None = None  # Honeypot


def _parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query parameter, falling back to ``default`` when unusable."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 1 else default


def _client_ip(request: Request, trust_forwarded_for: bool) -> str:
    """Resolve the submitter address used for rate limiting."""
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def _read_body(request: Request, max_bytes: int) -> bytes:
    """Read the request body, aborting once it grows past ``max_bytes``."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise PayloadTooLargeError(max_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise PayloadTooLargeError(max_bytes)
    return bytes(body)


def _parse_submission(body: bytes) -> SubmitCommentAPIRequest:
    try:
        return SubmitCommentAPIRequest.model_validate_json(body)
    except PydanticValidationError as e:
        raise MalformedInputError() from e


@router.get("/comments", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    settings: FromDishka[Settings],
    page: str | None = None,
    limit: str | None = None,
) -> GetCommentsResponse | JSONResponse:
    """Get one page of root threads with their nested replies.

    ``page`` and ``limit`` fall back to their defaults when absent,
    non-numeric or below 1.

    Args:
        get_comments_use_case: Get comments use case from DI
        settings: Application settings from DI
        page: 1-based page number
        limit: Root threads per page

    Returns:
        Page of threads with currentPage, totalPages and totalItems
    """
    request = GetCommentsRequest(
        page=_parse_positive_int(page, 1),
        limit=_parse_positive_int(limit, settings.comments.default_page_size),
    )
    try:
        return await get_comments_use_case.execute(request)
    except StorageError as e:
        logfire.error("Comment retrieval failed", error=str(e))
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve comments"
        )


@router.post(
    "/comments",
    response_model=SubmitCommentResponse,
    response_model_exclude_none=True,
)
async def submit_comment(
    request: Request,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
    settings: FromDishka[Settings],
) -> SubmitCommentResponse | JSONResponse:
    """Submit a new comment or a reply.

    The body is a JSON object with ``name``, ``email``, ``content`` and
    optional ``parentId``. Oversized bodies are abandoned and the
    connection is closed.

    Args:
        request: Raw request (body is streamed)
        submit_comment_use_case: Submit comment use case from DI
        settings: Application settings from DI

    Returns:
        ``{success: true, message: "Comment saved"}`` on success, or a
        ``{success: false, message}`` failure
    """
    ip = _client_ip(request, settings.api.trust_forwarded_for)

    try:
        body = await _read_body(request, settings.submission.max_body_bytes)
        api_request = _parse_submission(body)
        return await submit_comment_use_case.execute(
            SubmitCommentRequest(
                name=api_request.name,
                email=api_request.email,
                content=api_request.content,
                parent_id=api_request.parent_id,
                website=api_request.website,
                ip=ip,
            )
        )
    except PayloadTooLargeError as e:
        logfire.warn("Submission body too large", ip=ip, error=str(e))
        return failure_response(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            "Request body too large",
            headers={"Connection": "close"},
        )
    except MalformedInputError as e:
        logfire.info("Malformed submission", ip=ip, error=str(e.__cause__ or e))
        return failure_response(status.HTTP_400_BAD_REQUEST, str(e))
    except ValidationError as e:
        return failure_response(status.HTTP_400_BAD_REQUEST, str(e))
    except RateLimitError as e:
        return failure_response(status.HTTP_429_TOO_MANY_REQUESTS, str(e))
    except StorageError as e:
        logfire.error("Comment storage failed", ip=ip, error=str(e))
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save comment"
        )
    except Exception as e:
        logfire.error("Unexpected error saving comment", ip=ip, error=str(e))
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save comment"
        )
