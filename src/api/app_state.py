"""
Cold Store Alert Webhook Application State

Centralized state management with type safety and runtime validation.
"""

from pydantic import BaseModel, Field

from core.handler.alert_dispatcher import AlertDispatcher
from core.schema.notifier_schema import NotificationConfigSchema
from core.util.notifier.base import BaseNotifier


class ColdStoreAppState(BaseModel):
    """
    Application state container.

    - Service mode (main_service.py):
      Notifier and config are built before uvicorn starts and injected here.

    - Standalone mode (uvicorn api.app:app):
      Components are initialized by lifecycle.py.
    """

    notifier: BaseNotifier | None = Field(default=None, description="Alert delivery channel")

    notification_config: NotificationConfigSchema | None = Field(
        default=None, description="Validated notification configuration"
    )

    notifier_config_path: str | None = Field(default=None, description="Path the config was loaded from")

    class Config:
        """Pydantic configuration."""

        arbitrary_types_allowed = True  # Allow BaseNotifier
        validate_assignment = True
        extra = "forbid"

    def is_initialized(self) -> bool:
        return self.notifier is not None and self.notification_config is not None

    def get_dispatcher(self) -> AlertDispatcher:
        """Build a dispatcher bound to the shared notifier and settings."""
        if not self.is_initialized():
            raise RuntimeError("Notifier not initialized")
        return AlertDispatcher(notifier=self.notifier, settings=self.notification_config.alert)

    def __repr__(self) -> str:
        notifier = self.notifier.notifier_type if self.notifier else "NO"
        recipients = len(self.notification_config.alert.recipients) if self.notification_config else 0
        return f"ColdStoreAppState(notifier={notifier}, recipients={recipients})"
