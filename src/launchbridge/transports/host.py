"""Host-process transport over the desktop bridge object."""

from collections.abc import Sequence

import orjson

from launchbridge.schemas.messages import Message, serialize_response
from launchbridge.schemas.types import ProgressCallback
from launchbridge.transports.base import HostBridge
from launchbridge.transports.progress import ProgressRouter
from launchbridge.utils.errors import BridgeInvocationError, ResponseEncodingError
from launchbridge.utils.telemetry import get_logger


class HostProcessTransport:
    """Transport for the desktop host process.

    Every request is sent as one bridge call on the request channel. Calls
    given a progress callback get their own progress channel; the router is
    subscribed to the bridge's progress event on first use and stays
    subscribed for the transport's lifetime.

    Example:
        >>> transport = HostProcessTransport(bridge)
        >>> await transport.invoke("clone_mod", ["a", "b"], on_progress=print)
    """

    def __init__(
        self,
        bridge: HostBridge,
        request_channel: str = "request",
        progress_event: str = "progress",
    ) -> None:
        """Initialize the host transport.

        Args:
            bridge: Bridge object exposed by the host process
            request_channel: Channel name requests are sent on
            progress_event: Bridge event carrying progress updates
        """
        self._bridge = bridge
        self._request_channel = request_channel
        self._progress_event = progress_event
        self._router = ProgressRouter()
        self._subscribed = False
        self._logger = get_logger("launchbridge.transports.host")

    @property
    def router(self) -> ProgressRouter:
        """Router distributing this bridge's progress events."""
        return self._router

    async def invoke(
        self,
        call_name: str,
        args: Sequence[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Send a request over the host bridge.

        Args:
            call_name: Name of the call
            args: Call arguments
            on_progress: Receives progress events for this call only

        Returns:
            The bridge response rendered as text

        Raises:
            BridgeInvocationError: If the bridge rejects the request
            ResponseEncodingError: If the response cannot be rendered as text
        """
        message = Message(call_name=call_name, args=args)
        self._logger.debug("Invoking on host bridge", message=message.to_json())

        if on_progress is None:
            return await self._send(message)

        self._ensure_subscribed()
        with self._router.open(message.request_id, on_progress):
            return await self._send(message)

    def _ensure_subscribed(self) -> None:
        if not self._subscribed:
            self._bridge.on(self._progress_event, self._router.dispatch)
            self._subscribed = True

    async def _send(self, message: Message) -> str:
        try:
            response = await self._bridge.invoke(
                self._request_channel, message.to_wire()
            )
        except Exception as e:
            self._logger.error(
                "Error while invoking on host bridge",
                call_name=message.call_name,
                request_id=message.request_id,
                error=str(e),
            )
            raise BridgeInvocationError(message.call_name, e) from e

        try:
            output = serialize_response(response)
        except orjson.JSONEncodeError as e:
            self._logger.error(
                "Cannot encode host bridge response",
                call_name=message.call_name,
                request_id=message.request_id,
                error=str(e),
            )
            raise ResponseEncodingError(message.call_name, e) from e

        self._logger.debug(
            "Got response", call_name=message.call_name, response=output
        )
        return output
