"""Request and response models for the agent endpoint.

The provider does not fix the response shape, so the body is classified
into one of a small set of known shapes before any text is extracted.
"""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_AGENT_ID = "68fd7252be2defc486f45787"


class AgentRequest(BaseModel):
    """Outbound payload for one user turn."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="The user's question, already trimmed")
    agent_id: str = Field(default=DEFAULT_AGENT_ID, description="Fixed agent identifier")

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be empty")
        return value


@dataclass(frozen=True)
class RawTextShape:
    """Body carries a non-empty ``raw_response`` string."""

    text: str

    def display_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class PlainTextShape:
    """``response`` is itself a string."""

    text: str

    def display_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class NestedResultShape:
    """``response`` is an object with a ``result`` string."""

    text: str

    def display_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class NestedMessageShape:
    """``response`` is an object with a ``message`` string."""

    text: str

    def display_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class OpaqueShape:
    """Anything else; shown as compact JSON text."""

    value: Any = None

    def display_text(self) -> str:
        if self.value is None:
            return ""
        return json.dumps(self.value, separators=(",", ":"), ensure_ascii=False)


ResponseShape = RawTextShape | PlainTextShape | NestedResultShape | NestedMessageShape | OpaqueShape
