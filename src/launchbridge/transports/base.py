"""Base protocols for backend transports."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from launchbridge.schemas.types import ProgressCallback
from launchbridge.utils.errors import TransportUnavailableError
from launchbridge.utils.telemetry import get_logger


@runtime_checkable
class Transport(Protocol):
    """Protocol that every backend transport must implement.

    A transport performs a named call against its environment and returns
    the raw textual result. It does not interpret the result.
    """

    async def invoke(
        self,
        call_name: str,
        args: Sequence[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Perform a named call.

        Args:
            call_name: Non-empty call name
            args: Ordered call arguments, or None for calls without arguments
            on_progress: Called for every progress event before the call returns

        Returns:
            The response payload as text.

        Raises:
            TransportError: If the environment rejected the call
        """
        ...


@runtime_checkable
class HostBridge(Protocol):
    """Shape of the bridge object a desktop host process exposes."""

    def invoke(self, channel: str, message: dict[str, Any]) -> Awaitable[Any]:
        """Send ``message`` on ``channel`` and await the host's response."""
        ...

    def on(self, event: str, handler: Callable[[Any], None]) -> Any:
        """Subscribe ``handler`` to a named bridge event."""
        ...


class UnavailableTransport:
    """Transport used when the console environment supplied none.

    Construction always succeeds so environment detection never fails; every
    call is rejected instead.
    """

    def __init__(self) -> None:
        self._logger = get_logger("launchbridge.transports.unavailable")

    async def invoke(
        self,
        call_name: str,
        args: Sequence[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        self._logger.warning("No transport available", call_name=call_name)
        raise TransportUnavailableError(call_name)
