from pydantic import BaseModel, Field, field_validator

from core.schema.alert_schema import AlertSettings


class EmailNotifierConfig(BaseModel):
    """Email notifier configuration"""

    enabled: bool = Field(default=True)
    smtp_host: str = Field(default="localhost", description="SMTP server host")
    smtp_port: int = Field(default=25, ge=1, le=65535)
    use_tls: bool = Field(default=False, description="Issue STARTTLS before login")
    username: str | None = Field(default=None, description="SMTP login, skipped when empty")
    password: str | None = None
    from_addr: str = Field(default="coldstore-monitor@localhost", description="Sender address")
    timeout_sec: float = Field(default=10.0, gt=0)

    @field_validator("username", "password", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        """YAML literals such as `password: 1234` load as numbers"""
        if v is None or v == "":
            return None
        return str(v)


class NotificationConfigSchema(BaseModel):
    """Root notification configuration schema"""

    alert: AlertSettings = Field(default_factory=AlertSettings)
    email: EmailNotifierConfig = Field(default_factory=EmailNotifierConfig)

    class Config:
        str_strip_whitespace = True
        validate_assignment = True
        extra = "forbid"  # Reject unknown fields (catch typos)
