"""Tests for HTTP middleware — security headers, request IDs."""

import pytest


@pytest.mark.asyncio
async def test_security_headers(client):
    r = await client.get("/api/test")
    assert r.status_code == 200
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["X-XSS-Protection"] == "1; mode=block"
    assert r.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


@pytest.mark.asyncio
async def test_auth_responses_not_cached(client):
    r = await client.post("/api/auth/login", json={})
    assert r.headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_security_headers_on_errors(client):
    r = await client.get("/api/sessions")
    assert r.status_code == 401
    assert r.headers["X-Frame-Options"] == "DENY"


@pytest.mark.asyncio
async def test_request_id_generated(client):
    """Each request gets a unique X-Request-ID header."""
    r1 = await client.get("/api/test")
    r2 = await client.get("/api/test")
    assert r1.headers["X-Request-ID"] != r2.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_request_id_propagated(client):
    r = await client.get("/api/test", headers={"X-Request-ID": "trace-12345"})
    assert r.headers["X-Request-ID"] == "trace-12345"


@pytest.mark.asyncio
async def test_no_hsts_on_http(client):
    r = await client.get("/api/test")
    assert "Strict-Transport-Security" not in r.headers


@pytest.mark.asyncio
@pytest.mark.parametrize("incoming", ["has spaces", "x" * 129, "semi;colon"])
async def test_malformed_request_id_replaced(client, incoming):
    r = await client.get("/api/test", headers={"X-Request-ID": incoming})
    returned = r.headers["X-Request-ID"]
    assert returned != incoming
    assert len(returned) == 36


@pytest.mark.asyncio
async def test_no_store_only_on_auth_routes(client):
    r = await client.get("/api/test")
    assert "Cache-Control" not in r.headers
