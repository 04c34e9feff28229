import logging

from core.model.enum.fault_condition_enum import FaultCondition
from core.schema.status_report_schema import StatusReport

logger = logging.getLogger("FaultEvaluator")


class FaultEvaluator:
    def __init__(self, conditions: list[FaultCondition] | None = None):
        # Check order follows the enum declaration unless a subset is given
        self.conditions: list[FaultCondition] = list(conditions) if conditions is not None else list(FaultCondition)

    def evaluate(self, report: StatusReport) -> list[FaultCondition]:
        """Return the conditions that match `report`, in check order."""
        matched: list[FaultCondition] = []

        for condition in self.conditions:
            value = report.get(condition.field_name)
            if condition.matches(value):
                logger.info(f"[MATCH] {condition.name}: {condition.field_name}={value}")
                matched.append(condition)
            else:
                logger.debug(f"[SKIP] {condition.name}: {condition.field_name}={value!r}")

        return matched
