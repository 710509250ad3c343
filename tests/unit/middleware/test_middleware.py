"""Unit tests for middleware."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SECURITY_HEADERS, SecurityHeadersMiddleware


@pytest.fixture
def app() -> FastAPI:
    """Minimal app wired with the same middleware stack as the service."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/ping")
    async def _():
        return {"ok": True}

    return app


@pytest.fixture
async def client(app: FastAPI):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestSecurityHeadersMiddleware:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(("header", "value"), list(SECURITY_HEADERS.items()))
    async def test_sets_header(self, client: AsyncClient, header: str, value: str):
        response = await client.get("/ping")

        assert response.headers[header] == value


class TestRequestIDMiddleware:
    @pytest.mark.asyncio
    async def test_generates_unique_ids(self, client: AsyncClient):
        r1 = await client.get("/ping")
        r2 = await client.get("/ping")

        assert r1.headers["x-request-id"]
        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_propagates_caller_id(self, client: AsyncClient):
        response = await client.get("/ping", headers={"X-Request-ID": "profile-req-1"})

        assert response.headers["x-request-id"] == "profile-req-1"

    @pytest.mark.asyncio
    async def test_replaces_oversized_caller_id(self, client: AsyncClient):
        response = await client.get("/ping", headers={"X-Request-ID": "x" * 500})

        assert len(response.headers["x-request-id"]) == 36


class TestRequestLoggingMiddleware:
    @pytest.mark.asyncio
    async def test_passes_response_through(self, client: AsyncClient):
        response = await client.get("/ping")

        assert response.status_code == 200
        assert response.json() == {"ok": True}

