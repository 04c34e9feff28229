import logging
import os

import yaml
from pydantic import ValidationError

from core.schema.notifier_schema import EmailNotifierConfig, NotificationConfigSchema
from core.util.config_manager import ConfigManager
from core.util.notifier.base import BaseNotifier
from core.util.notifier.email_notifier import EmailNotifier
from exception import NotifierConfigError

logger = logging.getLogger("NotifierFactory")

# Kept as literal strings during env expansion
CREDENTIAL_KEYS: frozenset[str] = frozenset({"username", "password"})


def load_notification_config(config_path: str | None) -> NotificationConfigSchema:
    """
    Load and validate the notification config.

    A missing file falls back to the schema defaults (compiled-in recipients,
    local SMTP relay).

    Raises:
        NotifierConfigError: file exists but does not match the schema
    """
    if not config_path or not os.path.exists(config_path):
        logger.warning(f"Notification config not found ({config_path}), using defaults")
        return NotificationConfigSchema()

    try:
        raw_config: dict = ConfigManager.load_yaml_file(config_path)
    except yaml.YAMLError as e:
        logger.error(f"Unreadable notification config: {e}")
        raise NotifierConfigError(f"Unreadable notification config: {config_path}", config_path=config_path) from e

    # Parse environment variables in config
    raw_config = ConfigManager.parse_env_vars_recursive(raw_config, raw_keys=CREDENTIAL_KEYS)

    try:
        config = NotificationConfigSchema(**raw_config)
        logger.info("Notification config validated successfully")
    except ValidationError as e:
        logger.error(f"Invalid notification config: {e}")
        raise NotifierConfigError(f"Invalid notification config: {config_path}", config_path=config_path) from e

    return config


def build_notifier(config: EmailNotifierConfig) -> BaseNotifier:
    """Build the email notifier from validated schema"""
    notifier = EmailNotifier(config)
    logger.info(
        f"[EMAIL] Initialized (smtp={config.smtp_host}:{config.smtp_port}, "
        f"tls={config.use_tls}, enabled={config.enabled})"
    )
    return notifier


def build_notifier_and_settings(config_path: str | None) -> tuple[BaseNotifier, NotificationConfigSchema]:
    """
    Build notifier and alert settings from config.

    Returns:
        tuple: (notifier, validated_config_schema)
    """
    config = load_notification_config(config_path)
    notifier = build_notifier(config.email)

    logger.info(f"Alerts go to {len(config.alert.recipients)} recipient(s): {', '.join(config.alert.recipients)}")

    return notifier, config
