from .base import AgentTransport
from .errors import (
    ConnectionFailedError,
    HttpError,
    MalformedResponseError,
    NoContentError,
    TransportError,
)
from .factory import create_agent_transport
from .http import DEFAULT_AGENT_PATH, HttpAgentTransport
from .models import DEFAULT_AGENT_ID, AgentRequest, ResponseShape
from .normalizer import classify_response, normalize_response

__all__ = [
    "AgentRequest",
    "AgentTransport",
    "ConnectionFailedError",
    "DEFAULT_AGENT_ID",
    "DEFAULT_AGENT_PATH",
    "HttpAgentTransport",
    "HttpError",
    "MalformedResponseError",
    "NoContentError",
    "ResponseShape",
    "TransportError",
    "classify_response",
    "create_agent_transport",
    "normalize_response",
]
