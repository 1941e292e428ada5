"""Per-call progress channels for the host bridge.

The host bridge exposes a single ``progress`` event for all calls. The
router subscribes to it once and hands each event to the channel of the
request it belongs to, so concurrent progress-bearing calls never observe
each other's events. A channel is closed as soon as its call completes;
events arriving afterwards are discarded.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError

from launchbridge.schemas.messages import Progress
from launchbridge.schemas.types import ProgressCallback
from launchbridge.utils.telemetry import PROGRESS_EVENTS, get_logger


class ProgressChannel:
    """Progress stream of a single in-flight request."""

    def __init__(self, request_id: str, callback: ProgressCallback) -> None:
        """Initialize a progress channel.

        Args:
            request_id: Request the channel belongs to
            callback: Receives every event published while the channel is open

        Raises:
            ValueError: If request_id is empty
        """
        if not request_id.strip():
            raise ValueError("request_id cannot be empty")

        self.request_id = request_id
        self._callback = callback
        self._closed = False
        self.delivered = 0

    @property
    def closed(self) -> bool:
        """Check if the channel no longer accepts events."""
        return self._closed

    def publish(self, progress: Progress) -> bool:
        """Forward ``progress`` to the callback if the channel is open.

        Returns:
            True if the event was delivered, False if the channel was closed
        """
        if self._closed:
            return False
        self.delivered += 1
        self._callback(progress)
        return True

    def close(self) -> None:
        """Stop delivering events. Idempotent."""
        self._closed = True

    def __repr__(self) -> str:
        status = "closed" if self._closed else "open"
        return (
            f"ProgressChannel(request_id={self.request_id}, status={status}, "
            f"delivered={self.delivered})"
        )


class ProgressRouter:
    """Dispatches bridge progress events to per-request channels."""

    def __init__(self) -> None:
        self._channels: dict[str, ProgressChannel] = {}
        self._logger = get_logger("launchbridge.transports.progress")

    @property
    def open_channels(self) -> int:
        """Number of requests currently receiving progress."""
        return len(self._channels)

    @contextmanager
    def open(
        self, request_id: str, callback: ProgressCallback
    ) -> Iterator[ProgressChannel]:
        """Open a channel for ``request_id`` for the duration of the block.

        Raises:
            ValueError: If a channel for request_id is already open
        """
        if request_id in self._channels:
            raise ValueError(f"Progress channel already open for {request_id}")

        channel = ProgressChannel(request_id, callback)
        self._channels[request_id] = channel
        try:
            yield channel
        finally:
            channel.close()
            self._channels.pop(request_id, None)

    def dispatch(self, event: Any) -> None:
        """Route one raw progress event from the bridge.

        Tagged events go to their request's channel. Untagged events go to
        the only open channel; with several open they cannot be attributed
        and are dropped.
        """
        try:
            progress = Progress.model_validate(event)
        except ValidationError as e:
            PROGRESS_EVENTS.labels(outcome="invalid").inc()
            self._logger.warning("Discarding malformed progress event", error=str(e))
            return

        channel = self._resolve(progress)
        if channel is None:
            PROGRESS_EVENTS.labels(outcome="dropped").inc()
            self._logger.warning(
                "Dropping unroutable progress event",
                request_id=progress.request_id,
                open_channels=len(self._channels),
            )
            return

        channel.publish(progress)
        PROGRESS_EVENTS.labels(outcome="delivered").inc()

    def _resolve(self, progress: Progress) -> ProgressChannel | None:
        if progress.request_id is not None:
            return self._channels.get(progress.request_id)
        if len(self._channels) == 1:
            return next(iter(self._channels.values()))
        return None
