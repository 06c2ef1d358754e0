"""Configuration for neo-tokens: settings, engine snapshots and logging."""

from .engine_config import EngineConfig
from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    get_log_level_from_verbosity,
    get_logger,
    setup_logging,
)
from .settings import TokenSettings, get_token_settings

__all__ = [
    "EngineConfig",
    "TokenSettings",
    "get_token_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "get_log_level_from_verbosity",
    "get_logger",
    "setup_logging",
]
