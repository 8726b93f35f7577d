# config_manager.py - JSON config manager

import json
import os

from prefix_autocompleter.utils.logger_utils import LEVELS

DEFAULTS = {
    "max_suggestions": 10,
    "thread_safe": False,
    "log_level": "INFO",
    "log_path": os.path.join("logs", "prefix_autocompleter.log"),
    "use_color": True,
    "slow_query_ms": 50.0,
}

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}

# numeric options that must not go below zero
_NON_NEGATIVE = {"max_suggestions", "slow_query_ms"}


class ConfigError(ValueError):
    """Bad config file, unknown key or a value of the wrong type."""


def parse_bool(key, value):
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean value for key '{key}': {value!r}")


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{self.path} must hold a JSON object")
        for k, v in raw.items():
            self.data[k] = self._coerce(k, v)

    def _coerce(self, key, val):
        if key not in DEFAULTS:
            raise ConfigError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool:
            return parse_bool(key, val)
        try:
            out = kind(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Option {key} expects {kind.__name__}, got {val!r}") from e
        if key in _NON_NEGATIVE and out < 0:
            raise ConfigError(f"Option {key} must be >= 0, got {val!r}")
        if key == "log_level":
            out = out.upper()
            if out not in LEVELS:
                raise ConfigError(f"Option log_level must be one of {', '.join(LEVELS)}, got {val!r}")
        return out

    def get(self, key):
        return self.data[key]

    def save(self):
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def items(self):
        return self.data.items()

    def set(self, key, val):
        self.data[key] = self._coerce(key, val)
        self.save()
