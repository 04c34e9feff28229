from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from core.model.enum.fault_condition_enum import FaultCondition

DEFAULT_RECIPIENTS: list[str] = ["your-email@email.com", "your-other-email@email.com"]
DEFAULT_SUBJECT: str = "🚨 Cold store alarm"


class AlertMessageModel(BaseModel):
    condition: FaultCondition
    subject: str
    message: str
    timestamp: datetime


class AlertSettings(BaseModel):
    """Who gets notified and with which subject line"""

    recipients: list[str] = Field(default_factory=lambda: list(DEFAULT_RECIPIENTS), description="Alert recipients")
    subject: str = Field(default=DEFAULT_SUBJECT, description="Subject line used for every alert")

    @field_validator("recipients")
    @classmethod
    def validate_recipients(cls, v):
        if not v:
            raise ValueError("recipients must have at least one element")
        for address in v:
            if "@" not in address:
                raise ValueError(f"Invalid email address: {address}")
        return v
