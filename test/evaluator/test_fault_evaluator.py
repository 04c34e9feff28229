import pytest

from core.evaluator.fault_evaluator import FaultEvaluator
from core.model.enum.fault_condition_enum import FaultCondition
from core.schema.status_report_schema import StatusReport


def _report(**values) -> StatusReport:
    return StatusReport.model_validate({"values": [{"name": k, "value": v} for k, v in values.items()]})


@pytest.fixture
def evaluator() -> FaultEvaluator:
    return FaultEvaluator()


class TestFaultEvaluator:
    def test_when_device_not_responsive_then_matches_not_responding(self, evaluator):
        assert evaluator.evaluate(_report(deviceResponsive=False)) == [FaultCondition.DEVICE_NOT_RESPONDING]

    def test_when_temperature_alarm_then_matches_temperature(self, evaluator):
        assert evaluator.evaluate(_report(temperatureAlarmStatus=True)) == [FaultCondition.TEMPERATURE_ALARM]

    def test_when_open_door_alarm_then_matches_open_door(self, evaluator):
        assert evaluator.evaluate(_report(openDoorAlarmStatus=True)) == [FaultCondition.OPEN_DOOR_ALARM]

    def test_when_all_healthy_then_nothing_matches(self, evaluator):
        report = _report(deviceResponsive=True, temperatureAlarmStatus=False, openDoorAlarmStatus=False)

        assert evaluator.evaluate(report) == []

    def test_when_fields_absent_then_nothing_matches(self, evaluator):
        assert evaluator.evaluate(_report(ambientTemperature=4.0)) == []

    def test_when_all_faults_then_matches_in_fixed_order(self, evaluator):
        """
        GIVEN every fault field set, listed in reverse order
        WHEN evaluating
        THEN matches follow the fixed check order, not payload order
        """
        report = _report(openDoorAlarmStatus=True, temperatureAlarmStatus=True, deviceResponsive=False)

        assert evaluator.evaluate(report) == [
            FaultCondition.DEVICE_NOT_RESPONDING,
            FaultCondition.TEMPERATURE_ALARM,
            FaultCondition.OPEN_DOOR_ALARM,
        ]

    @pytest.mark.parametrize("value", ["true", "1", 1, None])
    def test_when_value_not_boolean_then_alarm_does_not_match(self, evaluator, value):
        assert evaluator.evaluate(_report(temperatureAlarmStatus=value)) == []

    @pytest.mark.parametrize("value", ["false", 0, "", None])
    def test_when_value_not_boolean_then_not_responding_does_not_match(self, evaluator, value):
        assert evaluator.evaluate(_report(deviceResponsive=value)) == []

    def test_when_subset_given_then_only_checks_subset(self):
        evaluator = FaultEvaluator(conditions=[FaultCondition.OPEN_DOOR_ALARM])
        report = _report(deviceResponsive=False, openDoorAlarmStatus=True)

        assert evaluator.evaluate(report) == [FaultCondition.OPEN_DOOR_ALARM]


class TestFaultConditionEnum:
    def test_fields_and_messages(self):
        assert FaultCondition.DEVICE_NOT_RESPONDING.field_name == "deviceResponsive"
        assert FaultCondition.DEVICE_NOT_RESPONDING.trigger_value is False
        assert FaultCondition.TEMPERATURE_ALARM.message == "⚠️ The cold store temperature alarm was triggered!"
        assert FaultCondition.OPEN_DOOR_ALARM.message == "⚠️ The cold store open-door alarm was triggered!"

    def test_declaration_order_is_check_order(self):
        assert [c.field_name for c in FaultCondition] == [
            "deviceResponsive",
            "temperatureAlarmStatus",
            "openDoorAlarmStatus",
        ]
