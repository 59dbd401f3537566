from typing import Any

from .base import AgentTransport
from .http import HttpAgentTransport


def create_agent_transport(kind: str = "http", **config: Any) -> AgentTransport:
    """Create an agent transport instance.

    This factory function hides the instantiation logic for transports.

    Args:
        kind: Transport type (currently only 'http')
        **config: Transport-specific configuration
            For HTTP:
                - base_url: str (required)
                - agent_id: str (default: built-in agent id)
                - path: str (default: '/api/agent')

    Returns:
        Initialized agent transport

    Raises:
        ValueError: If transport type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> transport = create_agent_transport(
        ...     "http",
        ...     base_url="http://localhost:3000",
        ... )
    """
    kind_lower = kind.lower()

    if kind_lower == "http":
        if "base_url" not in config:
            raise TypeError("HTTP transport requires 'base_url' in config")
        return HttpAgentTransport(**config)

    raise ValueError(
        f"Unsupported transport: {kind}. "
        f"Supported transports: 'http'"
    )
