from enum import Enum


class FaultCondition(Enum):
    """
    Fixed fault predicates checked against every status report.

    Each member carries the status field it reads, the boolean value that
    triggers it and the alert body sent when it matches. Declaration order is
    the check order.
    """

    DEVICE_NOT_RESPONDING = ("deviceResponsive", False, "⚠️ The cold store controller is not responding.")
    TEMPERATURE_ALARM = ("temperatureAlarmStatus", True, "⚠️ The cold store temperature alarm was triggered!")
    OPEN_DOOR_ALARM = ("openDoorAlarmStatus", True, "⚠️ The cold store open-door alarm was triggered!")

    def __init__(self, field_name: str, trigger_value: bool, message: str):
        self.field_name = field_name
        self.trigger_value = trigger_value
        self.message = message

    def matches(self, value) -> bool:
        # Only real booleans count; absent (None) or string values never trigger
        return isinstance(value, bool) and value is self.trigger_value
