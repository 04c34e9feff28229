"""
API Enum Definitions
"""

from enum import StrEnum


class ResponseStatus(StrEnum):
    """API response status"""

    SUCCESS = "success"
    ERROR = "error"


class HealthStatus(StrEnum):
    """Service health state"""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
