"""Process-scoped launcher runtime.

The runtime is built once by the entry point and passed to every consumer.
It owns the single Backend: on first access it probes the environment,
picks the transport and constructs the Backend; later accesses return that
same object without probing again.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from launchbridge.config.config import LauncherConfig, load_config, validate_config
from launchbridge.config.environment import (
    detect_backend_type,
    global_namespace,
    probe_console_transport,
    probe_host_bridge,
)
from launchbridge.core.backend import Backend
from launchbridge.schemas.types import BackendType
from launchbridge.transports.base import Transport, UnavailableTransport
from launchbridge.transports.host import HostProcessTransport
from launchbridge.utils.telemetry import get_logger, setup_logging


class LauncherRuntime:
    """Owner of the launcher's single Backend.

    Example:
        >>> runtime = LauncherRuntime.from_config()
        >>> backend = runtime.instance()
        >>> backend.platform_name()
        'Switch'
    """

    def __init__(
        self,
        config: LauncherConfig | None = None,
        namespace: Mapping[str, Any] | None = None,
        console_transport: Transport | None = None,
    ) -> None:
        """Initialize the runtime. Nothing is probed until first access.

        Args:
            config: Configuration (defaults if omitted)
            namespace: Namespace to probe (the interpreter globals if omitted)
            console_transport: Transport to use on the console when the
                environment does not expose one itself
        """
        self.config = config or LauncherConfig()
        self._namespace = namespace
        self._console_transport = console_transport
        self._backend: Backend | None = None
        self._logger = get_logger("launchbridge.runtime")

    @classmethod
    def from_config(
        cls,
        config_path: Path | None = None,
        namespace: Mapping[str, Any] | None = None,
        console_transport: Transport | None = None,
    ) -> "LauncherRuntime":
        """Load and validate configuration, set up logging, build a runtime.

        Debug mode forces DEBUG logging regardless of ``logging.level``.

        Raises:
            ConfigError: If the configuration is invalid
        """
        config = load_config(config_path)
        validate_config(config)
        log_level = "DEBUG" if config.debug else config.logging.level
        setup_logging(log_level, config.logging.format)
        return cls(config, namespace, console_transport)

    @property
    def initialized(self) -> bool:
        """Whether the Backend has been constructed."""
        return self._backend is not None

    def instance(self) -> Backend:
        """Return the Backend, constructing it on first call."""
        if self._backend is None:
            self._backend = self._create_backend()
        return self._backend

    def _create_backend(self) -> Backend:
        namespace = (
            self._namespace if self._namespace is not None else global_namespace()
        )
        bridge_config = self.config.bridge
        backend_type = detect_backend_type(namespace, bridge_config.host_bridge_name)

        transport: Transport
        if backend_type is BackendType.HOST_PROCESS:
            transport = HostProcessTransport(
                probe_host_bridge(namespace, bridge_config.host_bridge_name),
                request_channel=bridge_config.request_channel,
                progress_event=bridge_config.progress_event,
            )
        else:
            transport = (
                probe_console_transport(
                    namespace, bridge_config.console_transport_name
                )
                or self._console_transport
                or UnavailableTransport()
            )

        self._logger.info(
            "Backend detected",
            backend_type=backend_type.value,
            transport=type(transport).__name__,
        )
        return Backend(
            backend_type,
            transport,
            true_sentinel=self.config.messenger.true_sentinel,
            false_sentinel=self.config.messenger.false_sentinel,
        )
