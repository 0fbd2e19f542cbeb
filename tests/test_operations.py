from __future__ import annotations

import json

import httpx
import pytest

from terrakube import (
    APIError,
    AtomicRequest,
    Client,
    DecodeError,
    Operation,
    OperationAction,
    OperationRef,
)
from tests.fixture_server import FixtureServer, jsonapi_error, request_json

OPERATIONS = "POST /api/v1/operations"


def _results(*data) -> httpx.Response:
    return httpx.Response(200, json={"atomic:results": [{"data": d} for d in data]})


def _add_workspace(name: str) -> Operation:
    return Operation(
        op=OperationAction.ADD,
        href="/organization/org-1/workspace",
        data={"type": "workspace", "attributes": {"name": name}},
    )


def test_batch_is_sent_as_plain_json(server: FixtureServer, client: Client):
    server.handle(OPERATIONS, lambda _: _results({"type": "workspace", "id": "ws-1"}))

    client.operations.submit([_add_workspace("prod")])

    request = server.requests[0]
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request_json(request) == {
        "atomic:operations": [
            {
                "op": "add",
                "href": "/organization/org-1/workspace",
                "data": {"type": "workspace", "attributes": {"name": "prod"}},
            }
        ]
    }


def test_results_follow_submission_order(server: FixtureServer, client: Client):
    server.handle(
        OPERATIONS,
        lambda _: _results(
            {"type": "workspace", "id": "ws-1"},
            {"type": "workspace", "id": "ws-2"},
            None,
        ),
    )
    batch = AtomicRequest(
        operations=[
            _add_workspace("prod"),
            _add_workspace("staging"),
            Operation(op=OperationAction.REMOVE, ref=OperationRef(type="workspace", id="ws-0")),
        ]
    )

    results = client.operations.submit(batch)

    assert [r.data["id"] if r.data else None for r in results] == ["ws-1", "ws-2", None]
    sent = request_json(server.requests[0])["atomic:operations"]
    assert [op["op"] for op in sent] == ["add", "add", "remove"]
    assert sent[2]["ref"] == {"type": "workspace", "id": "ws-0"}


def test_empty_batch_yields_no_results(server: FixtureServer, client: Client):
    server.handle(OPERATIONS, lambda _: httpx.Response(200, json={"atomic:results": []}))

    assert client.operations.submit([]) == []
    assert json.loads(server.requests[0].content) == {"atomic:operations": []}


def test_failed_batch_is_an_api_error(server: FixtureServer, client: Client):
    server.handle(OPERATIONS, lambda _: jsonapi_error(422, "name must be unique"))

    with pytest.raises(APIError) as excinfo:
        client.operations.submit([_add_workspace("prod")])

    assert excinfo.value.status_code == 422
    assert excinfo.value.errors[0].detail == "name must be unique"


def test_result_count_mismatch_is_a_decode_error(server: FixtureServer, client: Client):
    server.handle(OPERATIONS, lambda _: _results({"type": "workspace", "id": "ws-1"}))

    with pytest.raises(DecodeError):
        client.operations.submit([_add_workspace("prod"), _add_workspace("staging")])


def test_malformed_results_are_a_decode_error(server: FixtureServer, client: Client):
    server.handle(OPERATIONS, lambda _: httpx.Response(200, json={"atomic:results": "nope"}))

    with pytest.raises(DecodeError):
        client.operations.submit([_add_workspace("prod")])
