# ABOUTME: Unit tests for the remote store HTTP client.
# ABOUTME: Tests the HttpClient protocol, LibrisHttpClient, retries, API keys, and error handling.

import json

import httpx
import pytest

from libris.store.http import HttpClient, HttpStatusError, LibrisHttpClient, RemoteFetchError
from tests.fixtures.transport import FailingTransport, FakeTransport


class TestHttpClientProtocol:
    """Tests for HttpClient protocol compliance."""

    def test_libris_client_satisfies_protocol(self) -> None:
        """LibrisHttpClient satisfies the HttpClient protocol."""
        client = LibrisHttpClient()
        assert isinstance(client, HttpClient)


class TestLibrisHttpClient:
    """Tests for LibrisHttpClient concrete class."""

    def test_get_returns_json(self) -> None:
        """GET request returns parsed JSON response."""
        transport = FakeTransport()
        client = LibrisHttpClient(transport=transport)
        assert client.request("GET", "https://example.com/api") == {"ok": True}

    def test_empty_body_returns_empty_dict(self) -> None:
        """A successful response without a body decodes to {}."""
        transport = FakeTransport([httpx.Response(200)])
        client = LibrisHttpClient(transport=transport)
        assert client.request("DELETE", "https://example.com/doc") == {}

    def test_sends_json_body_and_method(self) -> None:
        transport = FakeTransport()
        client = LibrisHttpClient(transport=transport)
        client.request("PATCH", "https://example.com/doc", json={"fields": {}})
        request = transport.requests[0]
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"fields": {}}

    def test_api_key_sent_as_query_param(self) -> None:
        transport = FakeTransport()
        client = LibrisHttpClient(api_key="secret", transport=transport)
        client.request("GET", "https://example.com/api", params={"pageSize": "10"})
        params = transport.requests[0].url.params
        assert params["key"] == "secret"
        assert params["pageSize"] == "10"

    def test_list_params_repeat_the_key(self) -> None:
        transport = FakeTransport()
        client = LibrisHttpClient(transport=transport)
        client.request("GET", "https://example.com/api", params={"f": ["a", "b"]})
        assert transport.requests[0].url.params.get_list("f") == ["a", "b"]

    def test_user_agent_header(self) -> None:
        transport = FakeTransport()
        client = LibrisHttpClient(transport=transport)
        client.request("GET", "https://example.com/api")
        headers = transport.requests[0].headers
        assert headers["user-agent"].startswith("libris/")
        assert "authorization" not in headers

    def test_http_error_raises_status_error(self) -> None:
        """Non-retryable HTTP errors raise HttpStatusError carrying the status."""
        transport = FakeTransport([httpx.Response(404, json={"error": "not found"})])
        client = LibrisHttpClient(transport=transport)

        with pytest.raises(HttpStatusError, match="404") as excinfo:
            client.request("GET", "https://example.com/missing")
        assert excinfo.value.status_code == 404
        assert transport.call_count == 1

    def test_retry_on_429(self) -> None:
        """Client retries on 429 status and succeeds on next attempt."""
        responses = [
            httpx.Response(429, json={"error": "rate limited"}),
            httpx.Response(200, json={"ok": True}),
        ]
        transport = FakeTransport(responses)
        client = LibrisHttpClient(transport=transport, retry_delay=0.01)

        assert client.request("GET", "https://example.com/api") == {"ok": True}
        assert transport.call_count == 2

    def test_retry_exhausted_raises(self) -> None:
        """After max retries, raises RemoteFetchError."""
        responses = [httpx.Response(503, json={"error": "unavailable"})] * 4
        transport = FakeTransport(responses)
        client = LibrisHttpClient(transport=transport, max_retries=3, retry_delay=0.01)

        with pytest.raises(RemoteFetchError, match="503"):
            client.request("GET", "https://example.com/api")
        assert transport.call_count == 4  # 1 initial + 3 retries

    def test_transport_error_raises(self) -> None:
        client = LibrisHttpClient(transport=FailingTransport())
        with pytest.raises(RemoteFetchError, match="Request failed"):
            client.request("GET", "https://example.com/api")
