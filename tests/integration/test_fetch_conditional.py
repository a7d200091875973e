"""Integration tests for cached fetches with Last-Modified revalidation."""

import json
import threading
from collections.abc import Generator
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from wowapi import WowApi
from wowapi.errors import ApiError, TransportError
from wowapi.fetch import FRESHNESS_WINDOW_SECONDS, FetchMetrics

from tests.helpers.time import FakeClock


def get_base_uri(server: HTTPServer) -> str:
    """Get a base URI template pointing at a test server.

    Args:
        server: The HTTP server instance.

    Returns:
        Base URI template with a protocol placeholder.
    """
    host, port = server.server_address[0], server.server_address[1]
    # Ensure host is a string (may be bytes in some socket scenarios)
    if isinstance(host, bytes):
        host = host.decode("utf-8")
    return f":protocol//{host}:{port}/"


class LastModifiedHandler(BaseHTTPRequestHandler):
    """HTTP handler serving boss data with Last-Modified support."""

    # Class-level state for test responses
    response_body: bytes = json.dumps(
        {"bosses": [{"id": 24723, "name": "Selin Fireheart"}]}
    ).encode("utf-8")
    last_modified: str = "Mon, 12 Jun 2017 22:00:00 GMT"
    requests_seen: list[dict[str, str | None]] = []

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        """Suppress log messages during tests."""

    def do_GET(self) -> None:  # noqa: N802
        """Handle GET requests with conditional caching support."""
        if_modified_since = self.headers.get("If-Modified-Since")
        LastModifiedHandler.requests_seen.append(
            {"path": self.path, "if_modified_since": if_modified_since}
        )

        if self.path.startswith("/wow/boss/missing"):
            body = b'{"status": "nok", "reason": "Boss not found."}'
            self.send_response(404)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
            return

        # If client has current version, return 304
        if if_modified_since == self.last_modified:
            self.send_response(304)
            self.send_header("Last-Modified", self.last_modified)
            self.end_headers()
            return

        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(self.response_body)))
        self.send_header("Last-Modified", self.last_modified)
        self.end_headers()
        self.wfile.write(self.response_body)


@pytest.fixture
def caching_server() -> Generator[HTTPServer]:
    """Start a local HTTP server with Last-Modified support."""
    LastModifiedHandler.requests_seen = []
    server = HTTPServer(("127.0.0.1", 0), LastModifiedHandler)
    thread = threading.Thread(target=server.serve_forever)
    thread.daemon = True
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def api(caching_server: HTTPServer, clock: FakeClock) -> WowApi:
    """Client pointed at the local server."""
    FetchMetrics.reset()
    return WowApi(
        "test-key",
        {"protocol": "http", "base_uri": get_base_uri(caching_server), "timeout": 5},
        clock=clock,
    )


class TestConditionalRequests:
    """Integration tests for the freshness window and 304 revalidation."""

    def test_first_fetch_stores_last_modified(self, api: WowApi) -> None:
        """The first fetch should store the origin timestamp."""
        bosses = api.get_bosses()

        assert bosses[0].name == "Selin Fireheart"
        envelope = api.service("bosses").fetch()
        assert envelope.last_modified_at == 1497304800
        assert len(LastModifiedHandler.requests_seen) == 1

    def test_fetch_within_window_skips_network(self, api: WowApi, clock: FakeClock) -> None:
        """A second fetch inside the window should not reach the server."""
        api.get_bosses()
        clock.advance(FRESHNESS_WINDOW_SECONDS / 2)
        api.get_bosses()

        assert len(LastModifiedHandler.requests_seen) == 1
        assert FetchMetrics.get_instance().cache_hits_total == 1

    def test_stale_fetch_gets_304(self, api: WowApi, clock: FakeClock) -> None:
        """A fetch past the window should revalidate and get a 304."""
        first = api.service("bosses").fetch()
        clock.advance(FRESHNESS_WINDOW_SECONDS + 1)
        second = api.service("bosses").fetch()

        assert second == first
        assert len(LastModifiedHandler.requests_seen) == 2
        assert LastModifiedHandler.requests_seen[1]["if_modified_since"] == (
            LastModifiedHandler.last_modified
        )

        metrics = FetchMetrics.get_instance()
        assert metrics.revalidated_total == 1
        assert metrics.network_calls_total == {200: 1, 304: 1}

    def test_query_string_sent(self, api: WowApi) -> None:
        """Requests should carry locale and apikey."""
        api.get_bosses()

        path = LastModifiedHandler.requests_seen[0]["path"]
        assert path is not None
        assert path.startswith("/wow/boss/?")
        assert "locale=en_US" in path
        assert "apikey=test-key" in path

    def test_error_response(self, api: WowApi) -> None:
        """A 404 from the origin should raise ApiError with the body."""
        with pytest.raises(ApiError) as exc_info:
            api.get_boss("missing")  # type: ignore[arg-type]

        assert exc_info.value.code == 404
        assert exc_info.value.detail == {"status": "nok", "reason": "Boss not found."}


class TestUnreachableOrigin:
    """Integration tests for connection failures."""

    def test_connection_refused(self, clock: FakeClock) -> None:
        """A closed port should raise TransportError."""
        server = HTTPServer(("127.0.0.1", 0), LastModifiedHandler)
        base_uri = get_base_uri(server)
        server.server_close()

        api = WowApi("test-key", {"protocol": "http", "base_uri": base_uri}, clock=clock)

        with pytest.raises(TransportError):
            api.get_bosses()
