"""
Tests for the API key gate used by the streamable HTTP transport.
"""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from utils.http_auth import MISSING_KEY_MESSAGE, ApiKeyAuthMiddleware, extract_api_key


def echo_key(request: Request) -> PlainTextResponse:
    return PlainTextResponse(request.scope["state"]["api_key"])


@pytest.fixture
def http_client():
    app = Starlette(routes=[Route("/mcp", echo_key, methods=["GET", "POST"])])
    with TestClient(ApiKeyAuthMiddleware(app)) as test_client:
        yield test_client


class TestExtractApiKey:
    """Tests for credential extraction."""

    def test_bearer_token(self):
        assert extract_api_key({"authorization": "Bearer  abc123 "}) == "abc123"

    def test_x_api_key(self):
        assert extract_api_key({"x-api-key": " k1 "}) == "k1"

    def test_bearer_wins_over_x_api_key(self):
        assert extract_api_key({"authorization": "Bearer a", "x-api-key": "b"}) == "a"

    def test_non_bearer_authorization_falls_back(self):
        assert extract_api_key({"authorization": "Basic xyz", "x-api-key": "b"}) == "b"

    @pytest.mark.parametrize("headers", [{}, {"authorization": "Bearer   "}, {"x-api-key": ""}])
    def test_missing_key(self, headers):
        assert extract_api_key(headers) is None


class TestApiKeyAuthMiddleware:
    """Tests for request gating."""

    def test_request_without_key_is_rejected(self, http_client):
        response = http_client.post("/mcp")
        assert response.status_code == 401
        assert response.json() == {"error": MISSING_KEY_MESSAGE}

    def test_bearer_request_passes(self, http_client):
        response = http_client.post("/mcp", headers={"Authorization": "Bearer secret"})
        assert response.status_code == 200
        assert response.text == "secret"

    def test_x_api_key_request_passes(self, http_client):
        response = http_client.get("/mcp", headers={"X-API-Key": "other"})
        assert response.status_code == 200
        assert response.text == "other"
