"""
Domain exceptions and their translation to HTTP responses.

Services raise these instead of HTTPException so the same code can be used
from scripts; register_exception_handlers() turns them into the
{"detail": ...} bodies FastAPI uses for its own errors.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class JobifyError(Exception):
    """Base class for errors that map to a client-facing status code."""
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_detail: str = "Bad request"
    headers: dict = {}

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthenticationError(JobifyError):
    """Bad credentials, or a malformed, forged or expired token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(JobifyError):
    """Valid token, insufficient role."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Insufficient permissions"


class NotFoundError(JobifyError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(JobifyError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Email already exists"


async def jobify_error_handler(request: Request, exc: JobifyError) -> JSONResponse:
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        logger.warning(f"Rejected unauthenticated request: {request.method} {request.url.path}")
    elif exc.status_code == status.HTTP_403_FORBIDDEN:
        logger.warning(f"Rejected unauthorized request: {request.method} {request.url.path}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers or None,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JobifyError, jobify_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
