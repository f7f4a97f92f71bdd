"""Pytest bootstrap configuration.

Ensure mandatory environment variables are set before test collection
and module imports that depend on application settings.
"""
import os

os.environ.setdefault("WEBPURIFY__API_KEY", "test-api-key")
os.environ.setdefault("DEBUG", "false")

import json

import httpx
import pytest


def envelope(stat: str = "ok", **payload) -> dict:
    """Build a WebPurify style response document."""
    rsp = {
        "@attributes": {"stat": stat},
        "method": "webpurify.live.check",
        "format": "rsp",
        "api_key": "test-api-key",
    }
    rsp.update(payload)
    return {"rsp": rsp}


class Recorder:
    """MockTransport handler returning a canned body and recording requests."""

    def __init__(self, body=None, status_code: int = 200, raw: bytes | None = None):
        self.body = body if body is not None else envelope()
        self.status_code = status_code
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        content = self.raw if self.raw is not None else json.dumps(self.body).encode()
        return httpx.Response(self.status_code, content=content, headers={"content-type": "application/json"})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def params(self) -> dict:
        return dict(self.last.url.params)


@pytest.fixture
def wp_envelope():
    return envelope


@pytest.fixture
def mock_api():
    """Factory returning (client, recorder) wired through httpx.MockTransport."""
    from infrastructure.external.webpurify import WebPurifyClient

    def _make(body=None, *, status_code: int = 200, raw: bytes | None = None, **options):
        recorder = Recorder(body, status_code=status_code, raw=raw)
        opts = {"api_key": "test-api-key", **options}
        client = WebPurifyClient(opts, transport=httpx.MockTransport(recorder))
        return client, recorder

    return _make
