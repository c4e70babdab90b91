"""Pytest shared fixtures for the Okta client tests."""
import json
import pathlib
import sys
from typing import Any, Optional
from urllib.parse import parse_qs, urlsplit

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from oktaclient.config.settings import resolve_profile
from oktaclient.core.client import OktaClient


def make_response(status_code: int, body: Any = None, url: str = "https://acme.okta.com/api/v1/") -> requests.Response:
    """Build a real requests.Response without touching the network.

    body may be None (empty), bytes/str (sent verbatim) or any JSON value.
    """
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    resp = requests.Response()
    resp.status_code = status_code
    resp._content = content
    resp.encoding = "utf-8"
    resp.url = url
    return resp


class RecordingTransport:
    """Stands in for requests.Session.send; records prepared requests."""

    def __init__(self):
        self.requests: list[requests.PreparedRequest] = []
        self.send_kwargs: list[dict] = []
        self._queue: list[tuple[int, Any]] = []
        self.echo = False

    def queue(self, status_code: int = 200, body: Any = None) -> None:
        self._queue.append((status_code, body))

    def send(self, request: requests.PreparedRequest, **kwargs) -> requests.Response:
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if self.echo:
            return make_response(200, request.body or b"", url=request.url)
        if self._queue:
            status_code, body = self._queue.pop(0)
        else:
            status_code, body = 200, {}
        return make_response(status_code, body, url=request.url)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return urlsplit(self.last.url).path

    @property
    def last_query(self) -> dict:
        return {k: v[0] for k, v in parse_qs(urlsplit(self.last.url).query).items()}

    @property
    def last_json(self) -> Optional[Any]:
        body = self.last.body
        if not body:
            return None
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return json.loads(body)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from reaching a live Okta org.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(self, prepared, **kwargs):
        raise RuntimeError(f"Unexpected network access in tests: {prepared.method} {prepared.url}")

    monkeypatch.setattr(requests.Session, "send", _refuse)


@pytest.fixture()
def http(monkeypatch):
    """Recording transport installed in place of requests.Session.send."""
    transport = RecordingTransport()
    monkeypatch.setattr(requests.Session, "send", lambda self, prepared, **kwargs: transport.send(prepared, **kwargs))
    return transport


@pytest.fixture()
def response_factory():
    return make_response


@pytest.fixture()
def profile():
    return resolve_profile("acme", "K")


@pytest.fixture()
def okta_client(profile, http):
    """OktaClient for acme.okta.com whose requests are recorded by `http`."""
    client = OktaClient(profile)
    yield client
    client.close()


# ─────────────────────────────────────────────────────────────────────────────
# Pytest Configuration
# ─────────────────────────────────────────────────────────────────────────────
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (requires a live Okta org)"
    )
