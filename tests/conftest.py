"""Shared fixtures: scripted transports and a fake host bridge."""

import asyncio
from collections.abc import Callable, Sequence
from typing import Any

import pytest
import structlog

from launchbridge.schemas.messages import Progress


class StubTransport:
    """Transport returning scripted responses and counting calls."""

    def __init__(
        self,
        responses: dict[str, str] | None = None,
        errors: dict[str, Exception] | None = None,
        progress: dict[str, list[Progress]] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.errors = errors or {}
        self.progress = progress or {}
        self.calls: list[tuple[str, list[str] | None]] = []

    async def invoke(
        self,
        call_name: str,
        args: Sequence[str] | None = None,
        on_progress: Callable[[Progress], None] | None = None,
    ) -> str:
        self.calls.append((call_name, list(args) if args is not None else None))
        if on_progress is not None:
            for event in self.progress.get(call_name, []):
                on_progress(event)
        if call_name in self.errors:
            raise self.errors[call_name]
        return self.responses.get(call_name, "ok")

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


class FakeBridge:
    """In-process stand-in for the desktop host bridge.

    Progress scripted for a call is emitted on the ``progress`` event while
    the call is in flight, yielding to the event loop between events so
    concurrent calls interleave.
    """

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        progress: dict[str, list[dict[str, Any]]] | None = None,
        error: Exception | None = None,
        tag_progress: bool = True,
    ) -> None:
        self.responses = responses or {}
        self.progress = progress or {}
        self.error = error
        self.tag_progress = tag_progress
        self.handlers: dict[str, list[Callable[[Any], None]]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in self.handlers.get(event, []):
            handler(payload)

    async def invoke(self, channel: str, message: dict[str, Any]) -> Any:
        self.calls.append((channel, message))
        for event in self.progress.get(message["call_name"], []):
            payload = dict(event)
            if self.tag_progress:
                payload["request_id"] = message["request_id"]
            self.emit("progress", payload)
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.responses.get(message["call_name"], "ok")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by individual tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_transport() -> Callable[..., StubTransport]:
    return StubTransport


@pytest.fixture
def make_bridge() -> Callable[..., FakeBridge]:
    return FakeBridge
