"""Failure taxonomy for the agent transport.

Every failure a caller can see is a TransportError whose message is safe
to show to the user as-is.
"""

GENERIC_HTTP_ERROR = "Failed to get response"
MALFORMED_RESPONSE_ERROR = "The agent returned an unreadable response."
NO_CONTENT_ERROR = "Unable to process your question."
CONNECTION_ERROR = "Could not reach the agent service."


class TransportError(Exception):
    """Base class for agent transport failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HttpError(TransportError):
    """Non-2xx status or an explicit ``success: false`` body."""

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or GENERIC_HTTP_ERROR)
        self.status_code = status_code


class MalformedResponseError(TransportError):
    """Response body could not be parsed as JSON."""

    def __init__(self, message: str = MALFORMED_RESPONSE_ERROR):
        super().__init__(message)


class NoContentError(TransportError):
    """Normalization produced an empty display string."""

    def __init__(self, message: str = NO_CONTENT_ERROR):
        super().__init__(message)


class ConnectionFailedError(TransportError):
    """Network-level failure before any response arrived."""

    def __init__(self, detail: str | None = None):
        message = CONNECTION_ERROR
        if detail:
            message = f"{CONNECTION_ERROR} ({detail})"
        super().__init__(message)
        self.detail = detail
