"""Shared pytest fixtures.

The GitHub API is replaced by an httpx.MockTransport serving a route table:
path -> JSON-able value, raw bytes, or an exception to raise. Paths not in
the table get GitHub's 404 error envelope.
"""

import asyncio
from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from projectinfo.api.deps import get_http_client
from projectinfo.config import Settings, get_settings
from projectinfo.main import app

API_URL = "https://api.github.test"

NOT_FOUND = {
    "message": "Not Found",
    "documentation_url": "https://docs.github.com/rest",
}


class FakeGitHub:
    """Route table plus a log of the paths requested."""

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.requested: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requested.append(path)
        if path not in self.routes:
            return httpx.Response(404, json=NOT_FOUND)
        value = self.routes[path]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, bytes):
            return httpx.Response(200, content=value)
        return httpx.Response(200, json=value)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=API_URL,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(PORT=8080, GITHUB_API_URL=API_URL)


@pytest.fixture
def fake_github():
    """Factory: fake_github(routes) -> FakeGitHub."""
    return FakeGitHub


@pytest.fixture
def call_upstream():
    """Run fn(client, *args) against a FakeGitHub and return the result."""

    def _call(github: FakeGitHub, fn, *args):
        async def _run():
            async with github.client() as client:
                return await fn(client, *args)

        return asyncio.run(_run())

    return _call


@pytest.fixture
def api_client(settings: Settings):
    """Factory: api_client(github, **overrides) -> TestClient."""

    def _make(github: FakeGitHub, **overrides: Any) -> TestClient:
        test_settings = settings.model_copy(update=overrides)

        async def _http_client():
            async with github.client() as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_http_client] = _http_client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
