"""Core type definitions shared across transports and the backend."""

from collections.abc import Callable
from enum import Enum

from .messages import Progress


class BackendType(Enum):
    """Execution environment the backend talks to."""

    HOST_PROCESS = "host_process"
    CONSOLE_WEBVIEW = "console_webview"


ProgressCallback = Callable[[Progress], None]
