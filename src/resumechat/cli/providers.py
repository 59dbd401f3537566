"""Provider factory functions for CLI.

Centralizes creation of the agent transport and preference store from
environment variables. Hides configuration details from commands.
"""

import os

from ..preferences import DEFAULT_PREFERENCES_PATH, PreferenceStore, create_preference_store
from ..transport import DEFAULT_AGENT_ID, DEFAULT_AGENT_PATH, AgentTransport, create_agent_transport

DEFAULT_BASE_URL = "http://localhost:3000"


def get_transport() -> AgentTransport:
    """Create the agent transport from environment variables.

    Environment variables:
        RESUMECHAT_BASE_URL: Relay server base URL (default: http://localhost:3000)
        RESUMECHAT_AGENT_PATH: Endpoint path (default: /api/agent)
        RESUMECHAT_AGENT_ID: Agent identifier (default: built-in id)
    """
    return create_agent_transport(
        "http",
        base_url=os.getenv("RESUMECHAT_BASE_URL", DEFAULT_BASE_URL),
        path=os.getenv("RESUMECHAT_AGENT_PATH", DEFAULT_AGENT_PATH),
        agent_id=os.getenv("RESUMECHAT_AGENT_ID", DEFAULT_AGENT_ID),
    )


def get_preferences(persist: bool = True) -> PreferenceStore:
    """Create the preference store.

    Args:
        persist: Use the JSON file store; otherwise keep preferences in memory

    Environment variables:
        RESUMECHAT_PREFERENCES_PATH: JSON file path
            (default: ~/.resumechat/preferences.json)
    """
    if not persist:
        return create_preference_store("memory")
    return create_preference_store(
        "json",
        path=os.getenv("RESUMECHAT_PREFERENCES_PATH", str(DEFAULT_PREFERENCES_PATH)),
    )
