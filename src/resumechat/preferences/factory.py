"""Factory for creating preference stores."""

from typing import Any

from .base import PreferenceStore


def create_preference_store(
    backend: str = "json",
    **kwargs: Any
) -> PreferenceStore:
    """Create a preference store.

    Args:
        backend: Backend type ("json" or "memory")
        **kwargs: Backend-specific configuration

    Returns:
        PreferenceStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "json":
        from .json_file import JsonFilePreferenceStore
        return JsonFilePreferenceStore(**kwargs)

    elif backend == "memory":
        from .in_memory import InMemoryPreferenceStore
        return InMemoryPreferenceStore(**kwargs)

    raise ValueError(
        f"Unsupported preference backend: {backend}. "
        f"Supported backends: json, memory"
    )
