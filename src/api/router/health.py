"""
Health Check Router
"""

import platform

from fastapi import APIRouter, Depends

from api.app_state import ColdStoreAppState
from api.dependency import get_app_state
from api.model.enums import HealthStatus
from api.model.responses import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check whether the webhook is running and has a notifier",
)
async def health_check(state: ColdStoreAppState = Depends(get_app_state)) -> HealthResponse:
    if not state.is_initialized():
        return HealthResponse(status=HealthStatus.DEGRADED, python_version=platform.python_version())

    return HealthResponse(
        status=HealthStatus.HEALTHY,
        python_version=platform.python_version(),
        notifier=state.notifier.notifier_type,
        recipient_count=len(state.notification_config.alert.recipients),
    )


@router.get("/ping", summary="Ping", description="Simple connectivity test")
async def ping():
    """Simple ping endpoint."""
    return {"message": "pong"}
