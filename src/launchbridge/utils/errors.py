"""Structured error types for backend requests.

Every failure a caller can observe from the backend is one of these, except
for the configuration errors raised by :mod:`launchbridge.config`.
"""


class LauncherError(Exception):
    """Base exception for launcher backend errors."""


class TransportError(LauncherError):
    """Error raised when a transport fails to complete a call.

    Carries the name of the call that failed so callers and log lines can
    attribute the failure without parsing the message.
    """

    def __init__(self, call_name: str, message: str):
        """Initialize transport error.

        Args:
            call_name: Name of the call that failed
            message: Error message
        """
        self.call_name = call_name
        super().__init__(message)


class BridgeInvocationError(TransportError):
    """Error raised when the host bridge rejects a request.

    The bridge's own exception is kept on ``cause`` and is also chained as
    ``__cause__`` by the transport.
    """

    def __init__(self, call_name: str, cause: BaseException):
        """Initialize bridge invocation error.

        Args:
            call_name: Name of the call that failed
            cause: Exception raised by the host bridge
        """
        self.cause = cause
        super().__init__(
            call_name, f"Host bridge rejected request {call_name}: {cause}"
        )


class ResponseEncodingError(TransportError):
    """Error raised when a bridge response cannot be rendered as text."""

    def __init__(self, call_name: str, cause: BaseException):
        """Initialize response encoding error.

        Args:
            call_name: Name of the call whose response failed to encode
            cause: Exception raised by the encoder
        """
        self.cause = cause
        super().__init__(
            call_name, f"Response to {call_name} cannot be encoded: {cause}"
        )


class TransportUnavailableError(TransportError):
    """Error raised when no transport was supplied by the environment."""

    def __init__(self, call_name: str):
        """Initialize transport unavailable error.

        Args:
            call_name: Name of the call that could not be sent
        """
        super().__init__(
            call_name, f"No transport available to send request {call_name}"
        )


class ResponseMappingError(LauncherError):
    """Error raised when a response does not match the expected sentinels.

    Boolean requests map ``"true"``/``"false"`` onto booleans. Anything else
    is a protocol violation and is never coerced to ``False``.
    """

    def __init__(self, call_name: str, response: str, expected: tuple[str, ...]):
        """Initialize response mapping error.

        Args:
            call_name: Name of the call whose response failed to map
            response: The raw response text
            expected: Sentinels that would have been accepted
        """
        self.call_name = call_name
        self.response = response
        self.expected = expected

        message = (
            f"Response to {call_name} is not a boolean sentinel: {response!r} "
            f"(expected one of {list(expected)})"
        )
        super().__init__(message)
