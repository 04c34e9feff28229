import os
import re

import yaml


class ConfigManager:

    @staticmethod
    def load_yaml_file(path: str) -> dict:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def parse_env_var_with_default(value: str, typed: bool = True) -> bool | int | float | str | None:
        match = re.match(r"\$\{(\w+)(?::-([^\}]*))?\}", value)  # Match ${VAR_NAME:-default} or ${VAR_NAME}
        if not match:
            return value

        var_name = match.group(1)
        default_value = match.group(2)

        resolved_value = os.getenv(var_name) or default_value
        if resolved_value is None:
            return None
        if not typed:
            return resolved_value
        return ConfigManager._parse_value_by_type(resolved_value)

    @staticmethod
    def parse_env_vars_recursive(obj, raw_keys: frozenset[str] = frozenset()):
        """
        Resolve ${VAR} placeholders in every string of a loaded config tree.
        Values under a key in `raw_keys` stay strings (e.g. "007" passwords).
        """
        if isinstance(obj, dict):
            return {
                k: (
                    ConfigManager.parse_env_var_with_default(v, typed=False)
                    if k in raw_keys and isinstance(v, str)
                    else ConfigManager.parse_env_vars_recursive(v, raw_keys)
                )
                for k, v in obj.items()
            }
        elif isinstance(obj, list):
            return [ConfigManager.parse_env_vars_recursive(item, raw_keys) for item in obj]
        elif isinstance(obj, str):
            return ConfigManager.parse_env_var_with_default(obj)
        else:
            return obj

    @staticmethod
    def _parse_value_by_type(value: str) -> bool | int | float | str:
        if value.lower() in ["true", "false"]:
            return value.lower() == "true"
        if ConfigManager._is_int(value):
            return int(value)
        if ConfigManager._is_float(value):
            return float(value)
        return value

    @staticmethod
    def _is_int(value: str) -> bool:
        try:
            int(value)
            return True
        except ValueError:
            return False

    @staticmethod
    def _is_float(value: str) -> bool:
        try:
            float(value)
            return True
        except ValueError:
            return False
