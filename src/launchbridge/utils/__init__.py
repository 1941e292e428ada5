# Shared utilities and helpers

from .errors import (
    BridgeInvocationError,
    LauncherError,
    ResponseEncodingError,
    ResponseMappingError,
    TransportError,
    TransportUnavailableError,
)
from .telemetry import get_logger, request_timer, setup_logging

__all__ = [
    "BridgeInvocationError",
    "LauncherError",
    "ResponseEncodingError",
    "ResponseMappingError",
    "TransportError",
    "TransportUnavailableError",
    "get_logger",
    "request_timer",
    "setup_logging",
]
