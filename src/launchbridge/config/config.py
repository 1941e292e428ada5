"""Core configuration management for launchbridge.

This module provides the configuration models and the loaders that read them
from YAML files and environment variables.
"""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError


class ConfigError(Exception):
    """Configuration-related errors."""

    pass


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "json"


class BridgeConfig(BaseModel):
    """Names used to find and talk to the environment's bridge objects."""

    host_bridge_name: str = "Main"
    console_transport_name: str = "nx"
    request_channel: str = "request"
    progress_event: str = "progress"


class MessengerConfig(BaseModel):
    """Response conventions for typed requests."""

    true_sentinel: str = "true"
    false_sentinel: str = "false"


class LauncherConfig(BaseModel):
    """Main configuration class for launchbridge."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    messenger: MessengerConfig = Field(default_factory=MessengerConfig)
    debug: bool = False


def load_config_from_file(config_path: Path) -> LauncherConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Loaded configuration

    Raises:
        ConfigError: If configuration is invalid or file cannot be read
    """
    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return LauncherConfig(**config_data)

    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in configuration file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e


def load_config_from_env() -> LauncherConfig:
    """Load configuration from environment variables.

    Environment variables are mapped as follows:
    - LAUNCHBRIDGE_DEBUG: Enable debug mode (true/false)
    - LAUNCHBRIDGE_LOG_LEVEL: Logging level
    - LAUNCHBRIDGE_LOG_FORMAT: Logging format (json/text)
    - LAUNCHBRIDGE_HOST_BRIDGE: Global name of the host bridge object
    - LAUNCHBRIDGE_CONSOLE_TRANSPORT: Global name of the console transport
    - LAUNCHBRIDGE_REQUEST_CHANNEL: Bridge channel requests are sent on
    - LAUNCHBRIDGE_PROGRESS_EVENT: Bridge event carrying progress

    Returns:
        Configuration loaded from environment variables
    """
    config_data: dict = {}

    if env_val := os.getenv("LAUNCHBRIDGE_DEBUG"):
        config_data["debug"] = env_val.lower() in ("true", "1", "yes", "on")

    logging_config = {}
    if env_val := os.getenv("LAUNCHBRIDGE_LOG_LEVEL"):
        logging_config["level"] = env_val.upper()
    if env_val := os.getenv("LAUNCHBRIDGE_LOG_FORMAT"):
        logging_config["format"] = env_val.lower()
    if logging_config:
        config_data["logging"] = logging_config

    bridge_config = {}
    if env_val := os.getenv("LAUNCHBRIDGE_HOST_BRIDGE"):
        bridge_config["host_bridge_name"] = env_val
    if env_val := os.getenv("LAUNCHBRIDGE_CONSOLE_TRANSPORT"):
        bridge_config["console_transport_name"] = env_val
    if env_val := os.getenv("LAUNCHBRIDGE_REQUEST_CHANNEL"):
        bridge_config["request_channel"] = env_val
    if env_val := os.getenv("LAUNCHBRIDGE_PROGRESS_EVENT"):
        bridge_config["progress_event"] = env_val
    if bridge_config:
        config_data["bridge"] = bridge_config

    try:
        return LauncherConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Environment configuration validation failed: {e}") from e


def load_config(config_path: Path | None = None) -> LauncherConfig:
    """Load configuration from file and environment variables.

    Configuration is loaded in the following order (later sources override earlier):
    1. Default values
    2. Configuration file (if provided)
    3. Environment variables

    Sections are replaced as a whole, not merged key by key.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Merged configuration
    """
    config = LauncherConfig()

    if config_path and config_path.exists():
        file_config = load_config_from_file(config_path)
        config = LauncherConfig(
            **{**config.model_dump(), **file_config.model_dump(exclude_unset=True)}
        )

    env_config = load_config_from_env()
    config = LauncherConfig(
        **{**config.model_dump(), **env_config.model_dump(exclude_unset=True)}
    )

    return config


def validate_config(config: LauncherConfig) -> None:
    """Validate configuration for consistency and correctness.

    Args:
        config: Configuration to validate

    Raises:
        ConfigError: If configuration is invalid
    """
    bridge = config.bridge
    for field_name in (
        "host_bridge_name",
        "console_transport_name",
        "request_channel",
        "progress_event",
    ):
        if not getattr(bridge, field_name).strip():
            raise ConfigError(f"bridge.{field_name} cannot be empty")

    if bridge.host_bridge_name == bridge.console_transport_name:
        raise ConfigError(
            "bridge.host_bridge_name and bridge.console_transport_name must differ"
        )

    messenger = config.messenger
    if not messenger.true_sentinel or not messenger.false_sentinel:
        raise ConfigError("messenger sentinels cannot be empty")
    if messenger.true_sentinel == messenger.false_sentinel:
        raise ConfigError("messenger.true_sentinel and false_sentinel must differ")
