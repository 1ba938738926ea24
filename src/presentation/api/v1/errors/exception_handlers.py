"""App-wide exception handlers.

Anything that escapes a router (routing errors, request validation, bugs)
still leaves as an RFC 9457 problem document carrying the request's trace_id.

Exports:
    register_exception_handlers: Attach the three handlers to an app.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status -> (title, slug used in the type URI)
_STATUS_TITLES: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
}

_UNEXPECTED_DETAIL = (
    "An unexpected error occurred. Please contact support with the trace ID."
)


def _problem(
    request: Request,
    *,
    status_code: int,
    slug: str,
    title: str,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unknown routes, wrong methods and HTTPExceptions from dependencies."""
    assert isinstance(exc, StarletteHTTPException)

    title, slug = _STATUS_TITLES.get(exc.status_code, ("Error", "error"))
    return _problem(
        request,
        status_code=exc.status_code,
        slug=slug,
        title=title,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Request body or query failed pydantic validation: 400 with field errors.

    The "body"/"query" prefix is stripped from each location, so a bad email
    in the registration body is reported as field "email".
    """
    assert isinstance(exc, RequestValidationError)

    field_errors = []
    for error in exc.errors():
        path = [str(part) for part in error.get("loc", []) if part not in ("body", "query")]
        field_errors.append(
            ErrorDetail(
                field=".".join(path) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return _problem(
        request,
        status_code=status.HTTP_400_BAD_REQUEST,
        slug="validation-failed",
        title="Validation Failed",
        detail="Request validation failed. Check 'errors' for details.",
        errors=field_errors or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the exception and answer 500 without leaking its message."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    trace_id = getattr(request.state, "trace_id", None)
    return _problem(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        slug="internal-server-error",
        title="Internal Server Error",
        detail=_UNEXPECTED_DETAIL,
        headers={"X-Trace-Id": trace_id} if trace_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
