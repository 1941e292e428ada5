"""Execution environment detection.

The desktop host injects its bridge object into the interpreter's global
namespace (``builtins``) before the launcher starts; the console webview
injects its own transport instead. Probing only looks names up and never
raises.
"""

import builtins
from collections.abc import Mapping
from typing import Any

from launchbridge.schemas.types import BackendType
from launchbridge.transports.base import HostBridge, Transport


def global_namespace() -> Mapping[str, Any]:
    """Return the namespace the execution environment injects objects into."""
    return vars(builtins)


def probe_host_bridge(
    namespace: Mapping[str, Any], name: str = "Main"
) -> HostBridge | None:
    """Look up the host bridge object.

    Args:
        namespace: Namespace to probe
        name: Name the host registers its bridge under

    Returns:
        The bridge, or None if absent
    """
    return namespace.get(name)


def probe_console_transport(
    namespace: Mapping[str, Any], name: str = "nx"
) -> Transport | None:
    """Look up the transport supplied by the console webview.

    Objects that do not implement the transport protocol count as absent.
    """
    candidate = namespace.get(name)
    if isinstance(candidate, Transport):
        return candidate
    return None


def detect_backend_type(
    namespace: Mapping[str, Any], host_bridge_name: str = "Main"
) -> BackendType:
    """Host bridge present means the desktop host, absent means the console."""
    if probe_host_bridge(namespace, host_bridge_name) is None:
        return BackendType.CONSOLE_WEBVIEW
    return BackendType.HOST_PROCESS
