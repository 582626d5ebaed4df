"""
Unit tests for the backend HTTP client.

Tests header construction, error translation and multipart encoding using
an in-memory httpx transport.
"""

import httpx
import pytest

from backend.client import API_KEY_HEADER, BackendClient, open_client
from models.errors import ApiError, ErrorCode, ToolError

from conftest import TEST_BASE_URL


class TestHeaders:
    """Tests for default and caller-supplied headers."""

    def test_auth_header_present_when_key_configured(self):
        client = BackendClient(TEST_BASE_URL, api_key="abc")
        assert client.auth_headers() == {API_KEY_HEADER: "abc"}
        client.close()

    def test_auth_header_absent_without_key(self):
        client = BackendClient(TEST_BASE_URL, api_key="")
        assert client.auth_headers() == {}
        assert client.build_headers() == {"Content-Type": "application/json"}
        client.close()

    def test_caller_headers_override_defaults(self):
        client = BackendClient(TEST_BASE_URL, api_key="abc")
        headers = client.build_headers({"Content-Type": "text/plain", "X-Trace": "1"})
        assert headers == {"Content-Type": "text/plain", API_KEY_HEADER: "abc", "X-Trace": "1"}
        client.close()

    def test_requests_carry_key_and_json_type(self, backend, client):
        client.get("/api/Job")
        assert backend.last.headers[API_KEY_HEADER] == "test-key"
        assert backend.last.headers["Content-Type"] == "application/json"

    def test_base_url_trailing_slash_is_stripped(self):
        client = BackendClient("http://backend.test/")
        assert client.base_url == "http://backend.test"
        client.close()


class TestRequests:
    """Tests for URL building, bodies and response parsing."""

    def test_query_params_and_path(self, backend, client):
        client.get("/api/Job", params={"pageNumber": "1", "pageSize": "10"})
        assert backend.last.url.path == "/api/Job"
        assert backend.last.url.params["pageNumber"] == "1"
        assert backend.last.url.params["pageSize"] == "10"

    def test_none_params_are_omitted(self, backend, client):
        client.get("/api/Job", params={"pageNumber": "1", "search": None, "status": None})
        assert dict(backend.last.url.params) == {"pageNumber": "1"}

    def test_all_none_params_send_no_query(self, backend, client):
        client.get("/api/Job", params={"search": None})
        assert backend.last.url.query == b""

    def test_list_params_repeat_key(self, backend, client):
        client.get("/api/CoffeeChat/profiles", params={"helpTopics": ["resume", "interview"]})
        assert backend.last.url.params.get_list("helpTopics") == ["resume", "interview"]

    def test_json_body_is_serialized(self, backend, client):
        client.post("/api/comment", json_body={"content": "hi"})
        assert backend.last.method == "POST"
        assert backend.last_json() == {"content": "hi"}

    def test_returns_parsed_json(self, backend, client):
        backend.respond("GET", "/api/profile", {"data": {"firstName": "Ada"}})
        assert client.get("/api/profile") == {"data": {"firstName": "Ada"}}

    def test_empty_body_returns_empty_dict(self, backend, client):
        backend.respond("DELETE", "/api/Job/1", text="", status_code=204)
        assert client.delete("/api/Job/1") == {}

    def test_non_json_body_raises_response_error(self, backend, client):
        backend.respond("GET", "/api/profile", text="<html>oops</html>")
        with pytest.raises(ToolError) as exc_info:
            client.get("/api/profile")
        assert exc_info.value.code == ErrorCode.RESPONSE_ERROR


class TestErrors:
    """Tests for non-success statuses and transport failures."""

    def test_non_2xx_raises_api_error_with_raw_body(self, backend, client):
        backend.respond("GET", "/api/Job/404", text='{"title":"Not Found"}', status_code=404)
        with pytest.raises(ApiError) as exc_info:
            client.get("/api/Job/404")

        error = exc_info.value
        assert error.status_code == 404
        assert error.body == '{"title":"Not Found"}'
        assert str(error) == 'API error 404: {"title":"Not Found"}'
        assert error.code == ErrorCode.API_ERROR

    def test_server_errors_are_retryable(self, backend, client):
        backend.respond("GET", "/api/dashboard/statistics", text="boom", status_code=503)
        with pytest.raises(ApiError) as exc_info:
            client.get("/api/dashboard/statistics")
        assert exc_info.value.retryable is True

    def test_client_errors_are_not_retryable(self, backend, client):
        backend.respond("GET", "/api/profile", text="nope", status_code=401)
        with pytest.raises(ApiError) as exc_info:
            client.get("/api/profile")
        assert exc_info.value.retryable is False

    def test_transport_failure_becomes_internal_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = BackendClient(TEST_BASE_URL, transport=httpx.MockTransport(refuse))
        with pytest.raises(ToolError) as exc_info:
            client.get("/api/profile")
        assert exc_info.value.code == ErrorCode.INTERNAL_ERROR
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        client.close()


class TestMultipart:
    """Tests for form submissions."""

    def test_post_form_sends_multipart_fields(self, backend, client):
        client.post_form("/api/Job/manually-save", {"Name": "Engineer", "CompanyName": "Acme"})

        request = backend.last
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert request.headers[API_KEY_HEADER] == "test-key"
        body = request.content.decode()
        assert 'name="Name"' in body
        assert "Engineer" in body
        assert 'name="CompanyName"' in body
        assert "filename=" not in body


class TestOpenClient:
    """Tests for the client context helper."""

    def test_given_client_is_not_closed(self, backend):
        client = backend.client()
        with open_client(client) as api:
            assert api is client
        api.get("/api/profile")
        assert backend.last.url.path == "/api/profile"
        client.close()
