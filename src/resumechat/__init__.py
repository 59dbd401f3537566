"""
Resumechat: a terminal chat client for a resume question-answering agent.

Each module hides one design decision: how questions reach the agent
(transport), how the conversation evolves (conversation), where client
preferences live (preferences) and how it all looks (ui).
"""

__version__ = "0.1.0"

from .conversation import ConversationStateMachine, Role, Turn
from .transport import (
    AgentTransport,
    HttpAgentTransport,
    TransportError,
    create_agent_transport,
    normalize_response,
)

__all__ = [
    "AgentTransport",
    "ConversationStateMachine",
    "HttpAgentTransport",
    "Role",
    "TransportError",
    "Turn",
    "create_agent_transport",
    "normalize_response",
]
