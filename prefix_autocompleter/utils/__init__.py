from .config_manager import Config, ConfigError
from .logger_utils import Log
from .metrics_tracker import Metrics

__all__ = ["Config", "ConfigError", "Log", "Metrics"]
