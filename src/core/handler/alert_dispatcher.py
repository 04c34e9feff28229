import logging
from datetime import datetime

from core.evaluator.fault_evaluator import FaultEvaluator
from core.schema.alert_schema import AlertMessageModel, AlertSettings
from core.schema.status_report_schema import StatusReport
from core.util.notifier.base import BaseNotifier

logger = logging.getLogger("AlertDispatcher")


class AlertDispatcher:
    """
    Turns one status report into alert emails.

    For every matching fault condition, one message goes to each recipient.
    Sends run one after another: condition order first, recipient order second.
    Delivery failures are reported by the notifier's return value only and
    never interrupt the remaining sends.
    """

    def __init__(
        self,
        notifier: BaseNotifier,
        settings: AlertSettings | None = None,
        evaluator: FaultEvaluator | None = None,
    ):
        self.notifier = notifier
        self.settings = settings or AlertSettings()
        self.evaluator = evaluator or FaultEvaluator()

    async def handle(self, body: bytes | str | None) -> dict:
        """
        Process a raw webhook body and return the acknowledgement payload.

        Raises:
            StatusReportError: body is present but not a valid report
        """
        report: StatusReport | None = StatusReport.from_body(body)
        if report is None:
            logger.info("[DISPATCH] Empty request body, nothing to check")
        else:
            await self.dispatch(report)

        return {"result": "done"}

    async def dispatch(self, report: StatusReport) -> list[AlertMessageModel]:
        alerts: list[AlertMessageModel] = [
            AlertMessageModel(
                condition=condition,
                subject=self.settings.subject,
                message=condition.message,
                timestamp=datetime.now(),
            )
            for condition in self.evaluator.evaluate(report)
        ]

        if not alerts:
            logger.debug("[DISPATCH] No fault condition matched")
            return alerts

        if not self.notifier.enabled:
            for alert in alerts:
                logger.warning(f"[DISPATCH] {alert.condition.name}: {self.notifier.notifier_type} disabled, not sent")
            return alerts

        for alert in alerts:
            success_count = 0
            for recipient in self.settings.recipients:
                if await self.notifier.send(recipient, alert.subject, alert.message):
                    success_count += 1

            if success_count == len(self.settings.recipients):
                logger.info(f"[DISPATCH] {alert.condition.name}: {success_count}/{len(self.settings.recipients)} sent")
            else:
                logger.error(
                    f"[DISPATCH] {alert.condition.name}: only {success_count}/{len(self.settings.recipients)} sent"
                )

        return alerts
