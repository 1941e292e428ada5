"""Typed request helpers over a transport.

The messenger is the single place rejections are logged. Logging is applied
by wrapping the transport's ``invoke`` rather than by subclassing, so every
request path shares it and the wrapped exception reaches the caller as-is.
"""

import functools
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from launchbridge.schemas.types import ProgressCallback
from launchbridge.transports.base import Transport
from launchbridge.utils.errors import ResponseMappingError
from launchbridge.utils.telemetry import get_logger, request_timer

InvokeFn = Callable[
    [str, Sequence[str] | None, ProgressCallback | None], Awaitable[str]
]


def log_rejections(invoke: InvokeFn, logger: Any) -> InvokeFn:
    """Wrap a transport ``invoke`` so every rejection is logged once.

    The exception is re-raised unchanged; there is no retry and no recovery.

    Args:
        invoke: The transport call to wrap
        logger: Structured logger receiving the rejection entries

    Returns:
        A coroutine function with the same signature as ``invoke``
    """

    @functools.wraps(invoke)
    async def wrapper(
        call_name: str,
        args: Sequence[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        with request_timer(call_name):
            try:
                return await invoke(call_name, args, on_progress)
            except Exception as e:
                logger.error(
                    "request rejected",
                    call_name=call_name,
                    args=list(args) if args is not None else None,
                    error=str(e),
                )
                raise

    return wrapper


class Messenger:
    """Typed request helpers bound to one transport.

    Example:
        >>> messenger = Messenger(HostProcessTransport(bridge))
        >>> await messenger.boolean_request("is_installed")
        True
    """

    def __init__(
        self,
        transport: Transport,
        true_sentinel: str = "true",
        false_sentinel: str = "false",
    ) -> None:
        """Initialize the messenger.

        Args:
            transport: Transport that performs the calls
            true_sentinel: Response text meaning True for boolean requests
            false_sentinel: Response text meaning False for boolean requests

        Raises:
            ValueError: If the sentinels are empty or identical
        """
        if not true_sentinel or not false_sentinel:
            raise ValueError("Boolean sentinels cannot be empty")
        if true_sentinel == false_sentinel:
            raise ValueError("Boolean sentinels must differ")

        self._transport = transport
        self._true_sentinel = true_sentinel
        self._false_sentinel = false_sentinel
        self._logger = get_logger("launchbridge.messenger")
        self._invoke = log_rejections(transport.invoke, self._logger)

    @property
    def transport(self) -> Transport:
        """The transport this messenger sends through."""
        return self._transport

    async def custom_request(
        self,
        name: str,
        args: Sequence[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Send a named request and return the raw response text.

        Args:
            name: Call name
            args: Call arguments
            on_progress: Receives progress events until the call completes

        Raises:
            TransportError: If the transport rejects the call
        """
        return await self._invoke(name, args, on_progress)

    async def boolean_request(
        self, name: str, args: Sequence[str] | None = None
    ) -> bool:
        """Send a named request whose response is a boolean sentinel.

        Raises:
            TransportError: If the transport rejects the call
            ResponseMappingError: If the response is not a known sentinel
        """
        result = await self.custom_request(name, args)
        if result == self._true_sentinel:
            return True
        if result == self._false_sentinel:
            return False

        self._logger.error(
            "Response is not a boolean sentinel", call_name=name, response=result
        )
        raise ResponseMappingError(
            name, result, (self._true_sentinel, self._false_sentinel)
        )

    async def exit_session(self) -> str:
        """End the interactive session and hand control to the game."""
        return await self.custom_request("exit_session")

    async def exit_application(self) -> str:
        """Close the launcher application."""
        return await self.custom_request("exit_application")

    async def ping(self, message: str = "ping") -> str:
        """Round-trip ``message`` through the backend."""
        return await self.custom_request("ping", [message])
