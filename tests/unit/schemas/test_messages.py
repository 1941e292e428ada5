"""Unit tests for request and progress models."""

import orjson
import pytest
from pydantic import ValidationError

from launchbridge.schemas.messages import Message, Progress, serialize_response


class TestMessage:
    """Test Message model."""

    def test_wire_shape(self) -> None:
        """Test the wire dict carries call name, args and request id."""
        message = Message(call_name="clone_mod", args=["a", "b"])
        wire = message.to_wire()

        assert wire["call_name"] == "clone_mod"
        assert wire["args"] == ["a", "b"]
        assert wire["request_id"] == message.request_id

    def test_args_default_to_none(self) -> None:
        """Test messages without arguments serialize args as null."""
        message = Message(call_name="get_platform")
        assert orjson.loads(message.to_json())["args"] is None

    def test_request_ids_are_unique(self) -> None:
        """Test every message gets its own request id."""
        first = Message(call_name="ping")
        second = Message(call_name="ping")
        assert first.request_id != second.request_id

    def test_empty_call_name_rejected(self) -> None:
        """Test call names must be non-empty."""
        with pytest.raises(ValidationError):
            Message(call_name="")

    def test_immutable(self) -> None:
        """Test messages cannot be modified after construction."""
        message = Message(call_name="ping")
        with pytest.raises(ValidationError):
            message.call_name = "other"  # type: ignore[misc]


class TestProgress:
    """Test Progress model."""

    def test_defaults(self) -> None:
        progress = Progress()
        assert progress.title == ""
        assert progress.progress == 0.0
        assert progress.request_id is None

    def test_extra_fields_preserved(self) -> None:
        """Test transport-defined fields survive validation."""
        progress = Progress.model_validate(
            {"title": "Copying", "progress": 42.0, "bytes_copied": 1024}
        )
        assert progress.model_dump()["bytes_copied"] == 1024

    def test_indeterminate_progress_accepted(self) -> None:
        """Test transport sentinels such as -1 are valid progress values."""
        assert Progress.model_validate({"progress": -1}).progress == -1.0

    def test_non_numeric_progress_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Progress.model_validate({"progress": "half"})


class TestSerializeResponse:
    """Test response re-serialization."""

    def test_string_passes_through(self) -> None:
        assert serialize_response("sd:/") == "sd:/"

    def test_boolean_becomes_sentinel(self) -> None:
        assert serialize_response(True) == "true"
        assert serialize_response(False) == "false"

    def test_structured_response_is_json(self) -> None:
        text = serialize_response({"version": "1.2.3", "beta": False})
        assert orjson.loads(text) == {"version": "1.2.3", "beta": False}

    def test_none_becomes_null(self) -> None:
        assert serialize_response(None) == "null"
