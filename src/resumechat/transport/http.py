from typing import Any

import httpx

from .base import AgentTransport
from .errors import ConnectionFailedError, HttpError, MalformedResponseError
from .models import DEFAULT_AGENT_ID, AgentRequest
from .normalizer import normalize_response

DEFAULT_AGENT_PATH = "/api/agent"


class HttpAgentTransport(AgentTransport):
    """Agent transport that POSTs to a relay endpoint over HTTP.

    Hidden design decisions:
    - HTTP client setup (httpx.AsyncClient, no timeout, no retries)
    - JSON payload layout and headers
    - Which status/body combinations count as failure
    - Delegation to the response normalizer
    """

    def __init__(
        self,
        base_url: str,
        agent_id: str = DEFAULT_AGENT_ID,
        path: str = DEFAULT_AGENT_PATH,
        **client_kwargs: Any
    ):
        """Initialize HTTP transport.

        Args:
            base_url: Relay server base URL (e.g. http://localhost:3000)
            agent_id: Fixed agent identifier sent with every request
            path: Relative endpoint path (default: /api/agent)
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._agent_id = agent_id
        self._path = path
        client_kwargs.setdefault("timeout", None)
        self._client = httpx.AsyncClient(base_url=base_url, **client_kwargs)

    @property
    def agent_id(self) -> str:
        return self._agent_id

    @property
    def endpoint(self) -> str:
        return f"{str(self._client.base_url).rstrip('/')}{self._path}"

    async def send(self, text: str) -> str:
        """POST one question and return the normalized answer.

        Args:
            text: Non-empty, already trimmed question

        Returns:
            Display text extracted from the response body

        Raises:
            ConnectionFailedError: The request never got a response
            MalformedResponseError: Body is not valid JSON
            HttpError: Non-2xx status or ``success`` is not truthy
            NoContentError: Normalized text is empty
        """
        request = AgentRequest(message=text, agent_id=self._agent_id)

        try:
            response = await self._client.post(
                self._path,
                json=request.model_dump(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TransportError as e:
            raise ConnectionFailedError(str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError() from e

        if not response.is_success or not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else None
            raise HttpError(
                error if isinstance(error, str) else None,
                status_code=response.status_code,
            )

        return normalize_response(data)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
