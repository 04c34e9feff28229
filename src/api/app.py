"""
FastAPI Application Entry Point
Responsibilities:
- Create FastAPI instance
- Register routes
- Configure middleware
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

from api.app_state import ColdStoreAppState
from api.lifecycle import shutdown_event, startup_event
from api.middleware.error_handler import add_error_handlers
from api.middleware.logging_middleware import LoggingMiddleware
from api.model.responses import ErrorResponse, WebhookAckResponse
from api.router import health, webhook
from core.util.logger_config import setup_logging

logger = logging.getLogger("ColdStoreAPI")

setup_logging(log_level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    await startup_event(app)
    try:
        yield
    finally:
        await shutdown_event(app)


def create_application(state: ColdStoreAppState | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application

    Args:
        state: Pre-built components; when omitted they are loaded at startup.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Cold Store Alert Webhook",
        description="Receives cold store controller status reports and emails fault alerts",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.coldstore = state if state is not None else ColdStoreAppState()

    app.add_middleware(LoggingMiddleware)

    add_error_handlers(app)

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(webhook.router, prefix="/api", tags=["Webhook"])

    # Controllers configured with the bare service URL post to the root
    app.add_api_route(
        "/",
        webhook.receive_status_report,
        methods=["POST"],
        response_model=WebhookAckResponse,
        responses={400: {"model": ErrorResponse}},
        include_in_schema=False,
    )

    return app


app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
