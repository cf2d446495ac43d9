from .loader import ConfigError, load_config
from .models import AppConfig, ChannelConfig, LimitsConfig, LoggingConfig, OutputConfig

# Config exports are intentionally small.
__all__ = [
    "AppConfig",
    "ChannelConfig",
    "ConfigError",
    "LimitsConfig",
    "LoggingConfig",
    "OutputConfig",
    "load_config",
]
