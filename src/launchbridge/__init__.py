"""launchbridge - Launcher backend request layer.

launchbridge gives the mod launcher one interface to its execution
environment, whether that is the desktop host process or the console
webview, with request logging and per-call progress reporting.
"""

__version__ = "0.1.0"

from .config import ConfigError, LauncherConfig, load_config
from .core import RELAUNCH_NOOP_RESPONSE, Backend, LauncherRuntime, Messenger
from .schemas import BackendType, Message, Progress
from .transports import HostBridge, HostProcessTransport, Transport
from .utils.errors import (
    BridgeInvocationError,
    LauncherError,
    ResponseEncodingError,
    ResponseMappingError,
    TransportError,
    TransportUnavailableError,
)

__all__ = [
    "RELAUNCH_NOOP_RESPONSE",
    "Backend",
    "BackendType",
    "BridgeInvocationError",
    "ConfigError",
    "HostBridge",
    "HostProcessTransport",
    "LauncherConfig",
    "LauncherError",
    "LauncherRuntime",
    "Message",
    "Messenger",
    "Progress",
    "ResponseEncodingError",
    "ResponseMappingError",
    "Transport",
    "TransportError",
    "TransportUnavailableError",
    "__version__",
    "load_config",
]
