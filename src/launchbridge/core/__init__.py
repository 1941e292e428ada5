# Core backend components

from .backend import RELAUNCH_NOOP_RESPONSE, Backend
from .messenger import Messenger, log_rejections
from .runtime import LauncherRuntime

__all__ = [
    "RELAUNCH_NOOP_RESPONSE",
    "Backend",
    "LauncherRuntime",
    "Messenger",
    "log_rejections",
]
