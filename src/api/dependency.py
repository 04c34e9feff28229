"""FastAPI Dependency Injection"""

from fastapi import Request

from api.app_state import ColdStoreAppState
from core.handler.alert_dispatcher import AlertDispatcher


def get_app_state(request: Request) -> ColdStoreAppState:
    """Provide the shared application state."""
    return request.app.state.coldstore


def get_alert_dispatcher(request: Request) -> AlertDispatcher:
    """Provide an AlertDispatcher bound to the configured notifier."""
    return get_app_state(request).get_dispatcher()
