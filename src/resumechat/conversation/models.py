"""Data models for the conversation.

These models define what a turn is and what the UI sees of the
conversation, independent of how the state machine stores them.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from uuid_extensions import uuid7


class Role(str, Enum):
    """Author of a turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ConversationPhase(str, Enum):
    """Whether a request is currently in flight."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class Turn(BaseModel):
    """One exchanged message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    # uuid7 is time-ordered, so ids sort in generation order
    id: str = Field(default_factory=lambda: str(uuid7()))
    role: Role
    content: str = Field(description="Message text, may span multiple lines")
    timestamp: datetime = Field(default_factory=datetime.now)
    error: bool = Field(
        default=False,
        description="True for assistant turns produced by a failure path",
    )

    @property
    def is_user(self) -> bool:
        return self.role == Role.USER


class ConversationSnapshot(BaseModel):
    """Read-only view of the conversation at one point in time."""

    model_config = ConfigDict(frozen=True)

    turns: tuple[Turn, ...] = ()
    loading: bool = False
    draft: str = ""

    @property
    def phase(self) -> ConversationPhase:
        return ConversationPhase.AWAITING_RESPONSE if self.loading else ConversationPhase.IDLE

    @property
    def is_empty(self) -> bool:
        return not self.turns
