"""Error envelope shared by exception handlers and middleware."""

from fastapi import Request
from fastapi.responses import JSONResponse

REQUEST_ID_HEADER = "X-Request-ID"


def error_response(
    request: Request, status_code: int, error_code: str, message: str
) -> JSONResponse:
    """Build the standard error body, echoing the request ID when known.

    Args:
        request: Request being answered.
        status_code: HTTP status code.
        error_code: Machine-readable error code.
        message: Human-readable message.

    Returns:
        JSON error response.
    """
    request_id = getattr(request.state, "request_id", None)
    headers = {REQUEST_ID_HEADER: request_id} if request_id else None

    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": [],
            "request_id": request_id,
        },
        headers=headers,
    )
