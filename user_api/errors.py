# user_api/errors.py
"""
Error types for the user API and the handlers that render them.

Every error response body has the shape {"error": "<message>"}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
USER_NOT_FOUND = "User not found"
FIELDS_REQUIRED = "Name and email are required"


class UserApiError(Exception):
    """Base for errors that terminate a request with a JSON error body."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(UserApiError):
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = FIELDS_REQUIRED):
        super().__init__(message)


class NotFoundError(UserApiError):
    http_status = status.HTTP_404_NOT_FOUND


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        logger.warning(f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unmatched paths and unsupported methods both fall through to the catch-all 404
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return await user_api_error_handler(request, NotFoundError(ROUTE_NOT_FOUND))

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
