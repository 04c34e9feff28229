"""
Global Error Handling Middleware

Provides unified handling for all API error responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from api.model.enums import ResponseStatus
from exception import StatusReportError

logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI):
    """
    Register error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(StatusReportError)
    async def status_report_error_handler(request: Request, exc: StatusReportError):
        """Handle bodies that could not be decoded into a status report."""
        logger.warning(f"Rejected status report on {request.url.path}: {exc}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": ResponseStatus.ERROR.value, "message": str(exc)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle value-related errors."""
        logger.error(f"ValueError on {request.url.path}: {str(exc)}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": ResponseStatus.ERROR.value, "message": str(exc)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": ResponseStatus.ERROR.value,
                "message": "An unexpected error occurred",
                "detail": str(exc) if logger.isEnabledFor(logging.DEBUG) else None,
            },
        )
