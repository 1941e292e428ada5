"""Data models and type definitions for the launcher backend."""

from .messages import Message, Progress, serialize_response
from .types import BackendType, ProgressCallback

__all__ = [
    "BackendType",
    "Message",
    "Progress",
    "ProgressCallback",
    "serialize_response",
]
