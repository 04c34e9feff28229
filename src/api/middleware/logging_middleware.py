"""
Request Logging Middleware
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status code and processing time of every request,
    and exposes the processing time as the X-Process-Time header.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        client = request.client.host if request.client else "-"
        logger.info(f"→ {request.method} {request.url.path} from {client}")

        response: Response = await call_next(request)

        process_time = time.perf_counter() - start_time
        logger.info(f"← {request.method} {request.url.path} [{response.status_code}] {process_time:.3f}s")

        response.headers["X-Process-Time"] = f"{process_time:.6f}"

        return response
