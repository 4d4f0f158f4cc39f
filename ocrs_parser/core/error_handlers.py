import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ocrs_parser.api.schemas import ProblemDetail
from ocrs_parser.core.exceptions import BaseError
from ocrs_parser.core.logging import get_request_id

logger = logging.getLogger(__name__)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Handler for malformed request bodies."""
    errors = exc.errors()
    first_error = errors[0] if errors else {}
    loc = first_error.get("loc", [])
    field = ".".join(str(loc_part) for loc_part in loc if loc_part != "body")
    msg = first_error.get("msg", "Validation failed")
    detail = f"{field}: {msg}" if field else msg

    logger.warning("request_validation_failed", extra={"http_status": 422})

    problem = ProblemDetail(
        type="/errors/VALIDATION_ERROR",
        title="Request validation failed",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=detail,
        instance=request.url.path,
        code="VALIDATION_ERROR",
        category="client_error",
        retryable=False,
        request_id=get_request_id(),
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=problem.model_dump(exclude_none=True),
    )


async def handle_app_error(request: Request, exc: BaseError):
    """Handler for application-specific BaseErrors."""
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        "application_error",
        extra={"error_code": exc.error_code, "http_status": exc.http_status},
    )

    problem = ProblemDetail(
        **exc.to_dict(),
        instance=request.url.path,
        request_id=get_request_id(),
    )

    return JSONResponse(
        status_code=exc.http_status,
        content=problem.model_dump(exclude_none=True),
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    """Handler for standard HTTP exceptions (404, 503, etc.)."""
    logger.warning("http_exception", extra={"http_status": exc.status_code})

    problem = ProblemDetail(
        type=f"/errors/HTTP_{exc.status_code}",
        title=str(exc.detail),
        status=exc.status_code,
        detail=str(exc.detail),
        code=f"HTTP_{exc.status_code}",
        category="server_error" if exc.status_code >= 500 else "client_error",
        retryable=exc.status_code == status.HTTP_503_SERVICE_UNAVAILABLE,
        instance=request.url.path,
        request_id=get_request_id(),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
    )


async def handle_unknown_error(request: Request, exc: Exception):
    """Handler for unexpected 500 errors."""
    logger.exception("unexpected_error", extra={"http_status": 500})

    problem = ProblemDetail(
        type="/errors/INTERNAL_SERVER_ERROR",
        title="Internal server error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the request ID.",
        code="INTERNAL_SERVER_ERROR",
        category="server_error",
        retryable=False,
        instance=request.url.path,
        request_id=get_request_id(),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )
