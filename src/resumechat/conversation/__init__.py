"""Conversation module for resumechat.

Holds the client-side conversation state and the submit/reset lifecycle.
"""

from .machine import FALLBACK_RESPONSE, GENERIC_ERROR, ConversationStateMachine
from .models import ConversationPhase, ConversationSnapshot, Role, Turn

__all__ = [
    "ConversationPhase",
    "ConversationSnapshot",
    "ConversationStateMachine",
    "FALLBACK_RESPONSE",
    "GENERIC_ERROR",
    "Role",
    "Turn",
]
