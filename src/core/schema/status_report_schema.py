import json
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator

from exception import StatusReportError


class StatusValue(BaseModel):
    """Single named property published by the cold store controller"""

    name: str
    value: Any = None


class StatusReport(BaseModel):
    """
    Decoded webhook payload.

    Example:
        {"values": [{"name": "deviceResponsive", "value": true},
                    {"name": "temperatureAlarmStatus", "value": false}]}

    The `values` sequence is folded once into a key-to-value mapping. When a
    key appears more than once the first occurrence wins.
    """

    values: list[StatusValue] = Field(default_factory=list)

    _mapping: dict[str, Any] = PrivateAttr(default_factory=dict)

    @field_validator("values", mode="before")
    @classmethod
    def drop_unnamed_entries(cls, v):
        """
        Treat `"values": null` the same as a missing field, and skip entries
        without a string name so one odd entry cannot hide a real alarm.
        """
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        return [entry for entry in v if isinstance(entry, dict) and isinstance(entry.get("name"), str)]

    def model_post_init(self, __context: Any) -> None:
        mapping: dict[str, Any] = {}
        for entry in self.values:
            mapping.setdefault(entry.name, entry.value)
        self._mapping = mapping

    def as_mapping(self) -> dict[str, Any]:
        return dict(self._mapping)

    def get(self, name: str) -> Any:
        """Return the value published under `name`, or None when absent."""
        return self._mapping.get(name)

    @classmethod
    def from_body(cls, body: bytes | str | None) -> "StatusReport | None":
        """
        Parse a raw request body.

        Returns:
            StatusReport | None: None when the body is empty.

        Raises:
            StatusReportError: body is not JSON, or not shaped as a report.
        """
        if body is None:
            return None
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        if not body.strip():
            return None

        try:
            raw = json.loads(body)
        except json.JSONDecodeError as e:
            raise StatusReportError(f"Request body is not valid JSON: {e.msg}", body=body) from e

        if not isinstance(raw, dict):
            raise StatusReportError(f"Expected a JSON object, got {type(raw).__name__}", body=body)

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise StatusReportError(f"Invalid status report: {e.error_count()} error(s)", body=body) from e
