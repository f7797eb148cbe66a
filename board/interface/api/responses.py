"""Shared response bodies for API routes."""

from fastapi.responses import JSONResponse


def failure_response(status_code: int, message: str, **kwargs) -> JSONResponse:
    """Build a ``{success: false, message}`` error response.

    Args:
        status_code: HTTP status code
        message: Client-safe message
        **kwargs: Passed through to JSONResponse (e.g. headers)
    """
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        **kwargs,
    )
