"""Pytest configuration and fixtures."""
import json
from typing import Any, Callable, List

import httpx
import pytest

from http_request.debug import DebugLevel
from http_request.domain.models import ClientConfig
from http_request.services.registry import ClientRegistry


class SleepRecorder:
    """Async stand-in for asyncio.sleep that records the requested delays."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class RecordingHandler:
    """MockTransport handler returning a canned response and keeping requests."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def json_bodies(self) -> List[Any]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def registry() -> ClientRegistry:
    """Fresh registry per test."""
    reg = ClientRegistry()
    yield reg
    reg.clear()


@pytest.fixture
def api_config() -> ClientConfig:
    """Valid https configuration."""
    return ClientConfig(name="api").configured(
        https=True,
        server="api.example.com",
        port="8080",
        domain="/v1",
        debug_level=DebugLevel.NONE,
    )


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    """Recorded retry delays."""
    return SleepRecorder()


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Factory for recording mock transport handlers."""

    def factory(
        status_code: int = 200,
        json_body: Any = None,
        text: str = "",
    ) -> RecordingHandler:
        def respond(request: httpx.Request) -> httpx.Response:
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, text=text)

        return RecordingHandler(respond)

    return factory


@pytest.fixture
def failing_handler() -> RecordingHandler:
    """Handler for a server that never answers."""

    def respond(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return RecordingHandler(respond)
