"""Transports that carry backend requests to the execution environment.

This package provides the transport protocol, the host-process
implementation and the per-call progress routing it relies on. The console
webview transport is supplied by the console environment itself.
"""

from launchbridge.transports.base import HostBridge, Transport, UnavailableTransport
from launchbridge.transports.host import HostProcessTransport
from launchbridge.transports.progress import ProgressChannel, ProgressRouter

__all__ = [
    "HostBridge",
    "HostProcessTransport",
    "ProgressChannel",
    "ProgressRouter",
    "Transport",
    "UnavailableTransport",
]
