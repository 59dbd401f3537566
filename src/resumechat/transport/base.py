from abc import ABC, abstractmethod
from typing import Any


class AgentTransport(ABC):
    """Abstract base class for agent transports.

    This module hides the design decision of how a question reaches the
    agent. Implementations must handle:
    - Request construction and wire encoding
    - Status and body validation
    - Mapping every failure onto a TransportError subtype

    Supports async context manager protocol for proper resource cleanup:
        async with transport:
            answer = await transport.send("What skills does Shreyas have?")
    """

    @abstractmethod
    async def send(self, text: str) -> str:
        """Send one question to the agent.

        Args:
            text: Non-empty, already trimmed question

        Returns:
            Normalized display text of the agent's answer

        Raises:
            TransportError: HttpError, MalformedResponseError,
                NoContentError or ConnectionFailedError
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Human-readable description of where requests go."""

    async def __aenter__(self) -> "AgentTransport":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
