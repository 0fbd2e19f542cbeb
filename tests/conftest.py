"""Shared fixtures: a fixture server and a client wired to it."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from terrakube import Client
from tests.fixture_server import FixtureServer

BASE_URL = "https://example.test"
TOKEN = "tok123"


@pytest.fixture
def server() -> FixtureServer:
    return FixtureServer()


@pytest.fixture
def client(server: FixtureServer) -> Iterator[Client]:
    http_client = server.http_client()
    with Client(BASE_URL, TOKEN, http_client=http_client) as client:
        yield client
    http_client.close()
