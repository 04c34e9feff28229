"""
Cold Store Alert Webhook Service Entry Point

Loads the notifier config up front so a broken config fails before the
HTTP server binds its port.
"""

import argparse
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from api.app import create_application
from api.app_state import ColdStoreAppState
from core.util.factory.notifier_factory import build_notifier_and_settings
from core.util.logger_config import setup_logging
from exception import ColdStoreError

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Cold Store Alert Webhook")

    parser.add_argument("--notifier_config", default="res/notifier_config.yml", help="Notifier configuration file")
    parser.add_argument("--host", default="0.0.0.0", help="API server host")
    parser.add_argument("--port", type=int, default=8000, help="API server port")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-to-file", action="store_true", help="Also write rotating log files under ./logs")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)

    load_dotenv()
    setup_logging(log_level=args.log_level, log_to_file=args.log_to_file)

    logger.info("=" * 80)
    logger.info("COLD STORE ALERT WEBHOOK")
    logger.info("=" * 80)
    logger.info(f"  Notifier Config: {args.notifier_config}")
    logger.info(f"  Listen:          {args.host}:{args.port}")
    logger.info("=" * 80)

    try:
        notifier, config = build_notifier_and_settings(args.notifier_config)
    except ColdStoreError as e:
        logger.error(f"Startup aborted: {e}")
        return 1

    state = ColdStoreAppState(
        notifier=notifier,
        notification_config=config,
        notifier_config_path=args.notifier_config,
    )
    app = create_application(state)

    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
