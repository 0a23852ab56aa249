"""Shared fixtures: a fake osu! API served over real HTTP and a client pointed at it."""

from __future__ import annotations

import asyncio
import json
from typing import Any, AsyncIterator, NamedTuple

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDict

from core import OsuClient
from utilities.config import Config

API_PREFIX = "/api/v2"
TOKEN = "test-token"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests that test individual components in isolation")
    config.addinivalue_line("markers", "integration: Integration tests that go through the HTTP stack")


class RecordedRequest(NamedTuple):
    method: str
    path: str
    raw_query: str
    query: list[tuple[str, str]]
    headers: CIMultiDict[str]


class FakeOsuAPI:
    """An aiohttp application answering canned responses by path."""

    def __init__(self) -> None:
        self.responses: dict[str, tuple[int, bytes, float]] = {}
        self.requests: list[RecordedRequest] = []
        self.base_url = ""
        self.app = web.Application()
        self.app.router.add_route("*", "/{tail:.*}", self._handle)

    def add(self, path: str, payload: Any = None, *, status: int = 200, body: bytes | None = None, delay: float = 0) -> None:  # noqa: ANN401
        """Answer ``GET <path>`` with ``payload`` as JSON, or ``body`` verbatim."""
        if body is None:
            body = json.dumps(payload).encode() if payload is not None else b""
        self.responses[path] = (status, body, delay)

    async def _handle(self, request: web.Request) -> web.Response:
        path = request.path.removeprefix(API_PREFIX)
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                raw_query=request.rel_url.raw_query_string,
                query=list(request.query.items()),
                headers=request.headers.copy(),
            )
        )
        status, body, delay = self.responses.get(path, (404, b'{"error":null}', 0))
        if delay:
            await asyncio.sleep(delay)
        return web.Response(status=status, body=body, content_type="application/json")

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


@pytest.fixture
async def fake_api() -> AsyncIterator[FakeOsuAPI]:
    api = FakeOsuAPI()
    server = TestServer(api.app)
    await server.start_server()
    api.base_url = str(server.make_url(API_PREFIX))
    try:
        yield api
    finally:
        await server.close()


@pytest.fixture
def config(fake_api: FakeOsuAPI) -> Config:
    return Config(base_url=fake_api.base_url, timeout=2.0, user_agent="osu-api-client-tests")


@pytest.fixture
async def osu(config: Config) -> AsyncIterator[OsuClient]:
    async with OsuClient(token=TOKEN, config=config) as client:
        yield client
