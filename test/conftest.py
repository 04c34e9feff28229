import json

import pytest

from core.schema.alert_schema import AlertSettings
from core.util.notifier.base import BaseNotifier


class RecordingNotifier(BaseNotifier):
    """Notifier double that keeps every send instead of delivering it"""

    def __init__(self, fail_for: set[str] | None = None):
        super().__init__(enabled=True)
        self.sent: list[tuple[str, str, str]] = []
        self.fail_for = fail_for or set()

    async def send(self, recipient: str, subject: str, body: str) -> bool:
        self.sent.append((recipient, subject, body))
        return recipient not in self.fail_for


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def alert_settings() -> AlertSettings:
    return AlertSettings(recipients=["ops@coldstore.test", "owner@coldstore.test"], subject="🚨 Cold store alarm")


@pytest.fixture
def make_body():
    """Build a raw webhook body from name/value pairs, keeping their order"""

    def _make(*pairs: tuple[str, object]) -> str:
        return json.dumps({"values": [{"name": name, "value": value} for name, value in pairs]})

    return _make


@pytest.fixture
def failing_notifier_factory():
    """Build a RecordingNotifier whose sends to the given recipients report failure"""

    def _make(*recipients: str) -> RecordingNotifier:
        return RecordingNotifier(fail_for=set(recipients))

    return _make
