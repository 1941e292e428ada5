"""Telemetry utilities for logging and request metrics.

This module provides the observability plumbing shared by the transports
and the messenger:
- Structured logging configured over stdlib logging
- Prometheus counters and histograms for backend requests
- A timer helper for measuring request latency
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Literal

import structlog
from prometheus_client import Counter, Histogram
from structlog.processors import JSONRenderer

# Prometheus metrics
REQUEST_COUNTER = Counter(
    "launchbridge_requests_total",
    "Total number of backend requests",
    ["call_name", "status"],
)

REQUEST_LATENCY = Histogram(
    "launchbridge_request_duration_seconds",
    "Backend request latency in seconds",
    ["call_name"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0, 120.0],
)

PROGRESS_EVENTS = Counter(
    "launchbridge_progress_events_total",
    "Progress events received from the host bridge",
    ["outcome"],
)


def setup_logging(
    log_level: str = "INFO", log_format: Literal["json", "text"] = "json"
) -> None:
    """Initialize structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: ``json`` for machine-readable lines, ``text`` for the
            structlog console renderer
    """
    logging.basicConfig(format="%(message)s", level=log_level.upper())

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context: Any) -> Any:
    """Get a structured logger with optional context.

    Args:
        name: Logger name
        **context: Additional context to bind to logger

    Returns:
        Bound logger with context
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


@contextmanager
def request_timer(call_name: str) -> Iterator[None]:
    """Record latency and outcome of a single backend request.

    The request is counted as ``error`` when the body raises, ``success``
    otherwise. The exception is never suppressed.

    Args:
        call_name: Call name used as the metric label
    """
    start_time = time.perf_counter()
    status = "error"
    try:
        yield
        status = "success"
    finally:
        REQUEST_LATENCY.labels(call_name=call_name).observe(
            time.perf_counter() - start_time
        )
        REQUEST_COUNTER.labels(call_name=call_name, status=status).inc()
