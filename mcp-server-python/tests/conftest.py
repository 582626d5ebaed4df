"""
Shared fixtures for tool tests.

``backend`` is a scripted JobJourney backend built on ``httpx.MockTransport``:
tests queue responses per route and inspect the requests that were sent.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from backend.client import BackendClient

TEST_BASE_URL = "http://backend.test"
TEST_API_KEY = "test-key"


class FakeBackend:
    """Records every request and answers from a route table."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], httpx.Response] = {}
        self.default = httpx.Response(200, json={})

    def respond(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
    ) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json_body if json_body is not None else {})
        self._routes[(method.upper(), path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._routes.get((request.method, request.url.path), self.default)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def client(self, api_key: str = TEST_API_KEY) -> BackendClient:
        return BackendClient(TEST_BASE_URL, api_key=api_key, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend):
    with backend.client() as api:
        yield api
