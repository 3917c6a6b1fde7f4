"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import LOG_LEVEL_ENV_VAR, configure_logging, resolve_log_level
from .snapshot import SNAPSHOT_PATH_ENV_VAR, SnapshotConfig, get_snapshot_config

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "SNAPSHOT_PATH_ENV_VAR",
    "ConfigurationError",
    "MissingConfigurationError",
    "SnapshotConfig",
    "configure_logging",
    "get_snapshot_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
]
