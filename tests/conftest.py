"""
Shared fixtures for the Gong MCP tests.

HTTP never leaves the process: every GongClient built here talks to an
httpx.MockTransport that records the requests it sees and answers with a
canned response.
"""
import json
from datetime import datetime, timezone

import httpx
import pytest

from gong_mcp.core.client import GongClient
from gong_mcp.core.config import GongCredentials
from gong_mcp.tools.dispatcher import Dispatcher

FIXED_NOW = datetime(2024, 3, 1, 9, 30, 0, 123000, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-03-01T09:30:00.123Z"


class FakeGong:
    """Stand-in for the Gong API: records requests, replays one response."""

    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the fake Gong API"
        return self.requests[-1]

    def last_json_body(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def credentials():
    return GongCredentials(access_key="test-access-key", access_secret="test-access-secret")


@pytest.fixture
def fake_gong():
    return FakeGong(body={"calls": []})


@pytest.fixture
def client(credentials, fake_gong):
    return GongClient(credentials, transport=fake_gong.transport, clock=lambda: FIXED_NOW)


@pytest.fixture
def dispatcher(client):
    return Dispatcher(client)
