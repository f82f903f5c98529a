"""Pytest configuration for kilo_cloud tests."""

import httpx
import pytest
import pytest_asyncio

from shared.rpc import ClientSettings


@pytest.fixture(autouse=True)
def kilo_env(tmp_path, monkeypatch):
    """Point credentials and the audit database at test values."""
    monkeypatch.setenv("KILO_API_KEY", "test-token")
    monkeypatch.setenv("KILO_TRPC_BASE_URL", "https://cloud.test/api/trpc")
    monkeypatch.setenv("KILO_REST_BASE_URL", "https://cloud.test/api")
    monkeypatch.setenv("KILO_AUDIT_DB_PATH", str(tmp_path / "audit.db"))
    monkeypatch.delenv("KILO_AUDIT_ENABLED", raising=False)
    monkeypatch.delenv("KILO_API_TIMEOUT", raising=False)


@pytest.fixture
def settings():
    return ClientSettings(
        trpc_base_url="https://cloud.test/api/trpc",
        rest_base_url="https://cloud.test/api",
        api_key="test-token",
        timeout=5.0,
    )


@pytest.fixture
def recorder():
    """Fake backend that records requests and replies with a configurable response."""

    class Recorder:
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.status = 200
            self.body = '{"ok": true}'

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status, text=self.body)

        def client_factory(self):
            return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    return Recorder()


@pytest_asyncio.fixture
async def client():
    """Create test client - import app lazily to allow env setup."""
    from kilo_cloud.main import app

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
