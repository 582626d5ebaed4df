"""
HTTP transport layer for the JobJourney backend.

Every tool talks to the backend through ``BackendClient``: it prefixes the
configured base URL, attaches the JSON content type and the ``X-API-Key``
header, and turns any non-success status into an ``ApiError`` carrying the
status code and the raw body text.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional

import httpx

from config import get_config
from models.errors import create_api_error, create_internal_error, create_response_error

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"
JSON_CONTENT_TYPE = "application/json"


class BackendClient:
    """
    Context manager wrapping an ``httpx.Client`` bound to one backend origin.

    Configuration is passed in explicitly so tests can build isolated
    clients (optionally with an ``httpx.MockTransport``).

    Usage:
        with BackendClient("http://localhost:5014", api_key="secret") as client:
            data = client.get("/api/Job", params={"pageNumber": "1"})
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_config(cls, config, transport: Optional[httpx.BaseTransport] = None) -> "BackendClient":
        """Build a client from a ``Config`` instance."""
        return cls(
            base_url=config.api_base_url,
            api_key=config.api_key,
            timeout=config.request_timeout,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        self._http.close()

    def auth_headers(self) -> Dict[str, str]:
        """Headers identifying the caller; empty when no API key is configured."""
        if not self.api_key:
            return {}
        return {API_KEY_HEADER: self.api_key}

    def build_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """
        Merge default headers with caller headers.

        Caller-supplied headers are shallow-merged over the defaults.
        """
        merged = {"Content-Type": JSON_CONTENT_TYPE}
        merged.update(self.auth_headers())
        if headers:
            merged.update(headers)
        return merged

    def request(
        self,
        path: str,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Perform one JSON request against the backend.

        Args:
            path: Endpoint path relative to the base URL (e.g. "/api/Job")
            method: HTTP method
            params: Optional query parameters (list values repeat the key, None
                values are omitted)
            json_body: Optional JSON-serializable body
            headers: Optional headers merged over the defaults

        Returns:
            The parsed JSON body (``{}`` for an empty body)

        Raises:
            ApiError: If the backend returns a non-success status
            ToolError: If the request cannot be sent or the body is not JSON
        """
        kwargs: Dict[str, Any] = {"headers": self.build_headers(headers)}
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if query:
            kwargs["params"] = query
        if json_body is not None:
            kwargs["json"] = json_body
        return self._send(method, path, **kwargs)

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request(path, method="GET", params=params)

    def post(self, path: str, json_body: Any = None, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request(path, method="POST", params=params, json_body=json_body)

    def put(self, path: str, json_body: Any = None) -> Any:
        return self.request(path, method="PUT", json_body=json_body)

    def delete(self, path: str) -> Any:
        return self.request(path, method="DELETE")

    def post_form(self, path: str, fields: Mapping[str, str]) -> Any:
        """
        POST plain form fields as multipart/form-data.

        Only the API-key header is attached; httpx sets the multipart
        content type (with boundary) itself.
        """
        # (None, value) tuples force multipart encoding without file names
        files = [(name, (None, value)) for name, value in fields.items()]
        return self._send("POST", path, headers=self.auth_headers(), files=files)

    def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("Request %s %s failed: %s", method, path, e)
            raise create_internal_error(f"Request to {path} failed: {e}", original_error=e) from e

        if not response.is_success:
            body = response.text
            logger.warning("Backend returned %s for %s %s", response.status_code, method, path)
            raise create_api_error(response.status_code, body)

        if not response.content.strip():
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise create_response_error(f"{method} {path} returned a non-JSON body", original_error=e) from e


@contextmanager
def open_client(client: Optional[BackendClient] = None) -> Iterator[BackendClient]:
    """
    Yield the given client, or a fresh one built from the global configuration.

    Clients passed in by the caller are left open; clients created here are
    closed on exit.
    """
    if client is not None:
        yield client
        return

    with BackendClient.from_config(get_config()) as owned:
        yield owned
