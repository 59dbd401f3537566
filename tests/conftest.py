"""Pytest configuration and shared fixtures."""
import asyncio
import json
import os

import httpx
import pytest

from resumechat.transport import AgentTransport, HttpAgentTransport


class ScriptedTransport(AgentTransport):
    """Transport that replays scripted answers or exceptions.

    When ``gate`` is set, every send() waits on it, which keeps a request
    in flight until the test releases it.
    """

    def __init__(self, outcomes=None, gate: asyncio.Event | None = None):
        self.outcomes = list(outcomes or [])
        self.gate = gate
        self.sent: list[str] = []
        self.closed = False

    @property
    def endpoint(self) -> str:
        return "scripted://agent"

    async def send(self, text: str) -> str:
        self.sent.append(text)
        # yield like a real network call would
        await asyncio.sleep(0)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0) if self.outcomes else "ok"
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def scripted_transport():
    """Return the ScriptedTransport class for building transports."""
    return ScriptedTransport


@pytest.fixture
def mock_http_transport():
    """Build an HttpAgentTransport whose requests hit a handler function.

    The handler receives the httpx.Request and returns an httpx.Response.
    Every request is recorded in ``transport.requests``.
    """
    def _build(handler, **kwargs) -> HttpAgentTransport:
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = HttpAgentTransport(
            base_url="http://relay.test",
            transport=httpx.MockTransport(_record),
            **kwargs,
        )
        transport.requests = requests
        return transport

    return _build


@pytest.fixture
def json_response():
    """Return a helper that builds a JSON httpx.Response."""
    def _make(body, status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=json.dumps(body).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    return _make


@pytest.fixture(scope="session")
def relay_url():
    """Return the relay URL for integration tests, if configured."""
    return os.getenv("RESUMECHAT_TEST_RELAY_URL")
