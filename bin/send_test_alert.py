#!/usr/bin/env python3
"""
Send a sample status report through the dispatcher using the real notifier
config, to check SMTP settings and recipients end to end.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

import argparse
import asyncio
import json
import logging

from dotenv import load_dotenv

from core.handler.alert_dispatcher import AlertDispatcher
from core.model.enum.fault_condition_enum import FaultCondition
from core.util.factory.notifier_factory import build_notifier_and_settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("SendTestAlert")


def build_payload(condition: FaultCondition) -> str:
    values = [{"name": c.field_name, "value": not c.trigger_value} for c in FaultCondition]
    for entry in values:
        if entry["name"] == condition.field_name:
            entry["value"] = condition.trigger_value
    return json.dumps({"values": values})


async def main():
    parser = argparse.ArgumentParser(description="Send a test cold store alert")
    parser.add_argument("--notifier_config", default=str(project_root / "res" / "notifier_config.yml"))
    parser.add_argument(
        "--condition",
        default=FaultCondition.TEMPERATURE_ALARM.name,
        choices=[c.name for c in FaultCondition],
    )
    args = parser.parse_args()

    load_dotenv(project_root / ".env")

    notifier, config = build_notifier_and_settings(args.notifier_config)
    dispatcher = AlertDispatcher(notifier=notifier, settings=config.alert)

    payload = build_payload(FaultCondition[args.condition])
    logger.info(f"Payload: {payload}")

    result = await dispatcher.handle(payload)
    logger.info(f"Result: {result}")


if __name__ == "__main__":
    asyncio.run(main())
