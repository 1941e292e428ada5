"""Configuration management for launchbridge.

This module provides configuration loading and validation, plus detection of
the execution environment the launcher runs in.
"""

from .config import (
    BridgeConfig,
    ConfigError,
    LauncherConfig,
    LoggingConfig,
    MessengerConfig,
    load_config,
    load_config_from_env,
    load_config_from_file,
    validate_config,
)
from .environment import (
    detect_backend_type,
    global_namespace,
    probe_console_transport,
    probe_host_bridge,
)

__all__ = [
    "BridgeConfig",
    "ConfigError",
    "LauncherConfig",
    "LoggingConfig",
    "MessengerConfig",
    "detect_backend_type",
    "global_namespace",
    "load_config",
    "load_config_from_env",
    "load_config_from_file",
    "probe_console_transport",
    "probe_host_bridge",
    "validate_config",
]
