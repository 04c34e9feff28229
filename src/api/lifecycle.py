"""Startup and shutdown hooks for the FastAPI application."""

import logging
import os
from pathlib import Path

from fastapi import FastAPI

from core.util.factory.notifier_factory import build_notifier_and_settings

logger = logging.getLogger(__name__)

DEFAULT_NOTIFIER_CONFIG = Path(__file__).parent.parent.parent / "res" / "notifier_config.yml"


async def startup_event(app: FastAPI) -> None:
    """Build the notifier unless main_service.py already injected one."""
    logger.info("=" * 60)
    logger.info("Starting Cold Store Alert Webhook...")
    logger.info("=" * 60)

    state = app.state.coldstore

    if state.is_initialized():
        logger.info(f"Using injected components: {state!r}")
        return

    try:
        config_path = os.getenv("COLDSTORE_NOTIFIER_CONFIG", str(DEFAULT_NOTIFIER_CONFIG))
        logger.info(f"Notifier config: {config_path}")

        notifier, config = build_notifier_and_settings(config_path)

        state.notifier = notifier
        state.notification_config = config
        state.notifier_config_path = config_path

        logger.info(f"State: {state!r}")
        logger.info("Startup completed")

    except Exception as exc:
        logger.error("=" * 60)
        logger.error("STARTUP FAILED")
        logger.error("=" * 60)
        logger.error(f"Error: {exc}", exc_info=True)
        raise


async def shutdown_event(app: FastAPI) -> None:
    logger.info("=" * 60)
    logger.info("Shutting down Cold Store Alert Webhook...")
    logger.info("=" * 60)
