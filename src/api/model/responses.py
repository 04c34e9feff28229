"""
API Response Data Models
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from api.model.enums import HealthStatus, ResponseStatus


class WebhookAckResponse(BaseModel):
    """
    Acknowledgement returned for every accepted status report.

    The body is fixed so the controller can treat any 200 as delivered,
    whether or not an alert fired.
    """

    result: Literal["done"] = "done"


class ErrorResponse(BaseModel):
    status: ResponseStatus = ResponseStatus.ERROR
    message: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """
    Health check payload.

    Attributes:
        status: HEALTHY when a notifier is configured, DEGRADED otherwise.
        recipient_count: Number of alert recipients currently configured.
        notifier: Notifier class name, None before startup completes.
    """

    status: HealthStatus
    timestamp: datetime = Field(default_factory=datetime.now)
    service: str = "Cold Store Alert Webhook"
    version: str = "1.0.0"
    python_version: str
    notifier: str | None = None
    recipient_count: int = 0
