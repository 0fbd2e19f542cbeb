"""In-process stand-in for the Terrakube API, built on ``httpx.MockTransport``.

Routes are keyed by ``"METHOD /path"``. Every request that reaches the
transport is recorded in ``FixtureServer.requests`` so tests can assert on
what was (or was not) sent. Unrouted requests get a JSON:API 404.
"""

from __future__ import annotations

import itertools
import json
from collections.abc import Callable
from typing import Any

import httpx

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

Handler = Callable[[httpx.Request], httpx.Response]


def jsonapi_response(data: Any, status_code: int = 200, included: list[dict] | None = None) -> httpx.Response:
    """Build a JSON:API document response around ``data``."""
    document: dict[str, Any] = {"data": data}
    if included:
        document["included"] = included
    return httpx.Response(
        status_code,
        content=json.dumps(document).encode(),
        headers={"Content-Type": JSONAPI_MEDIA_TYPE},
    )


def jsonapi_error(status_code: int, detail: str, title: str | None = None) -> httpx.Response:
    error: dict[str, Any] = {"detail": detail, "status": str(status_code)}
    if title:
        error["title"] = title
    return httpx.Response(
        status_code,
        content=json.dumps({"errors": [error]}).encode(),
        headers={"Content-Type": JSONAPI_MEDIA_TYPE},
    )


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


class ResourceStore:
    """Minimal JSON:API collection that echoes what it is sent.

    POST assigns an id and a ``createdDate``; GET, PATCH, and DELETE act on
    the stored copy.
    """

    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        self.items: dict[str, dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def handle_collection(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return jsonapi_response(list(self.items.values()))
        if request.method == "POST":
            data = request_json(request)["data"]
            resource_id = f"{self.resource_type}-{next(self._ids)}"
            resource = {
                "type": self.resource_type,
                "id": resource_id,
                "attributes": {**data.get("attributes", {}), "createdDate": "2026-01-01T00:00:00Z"},
            }
            if data.get("relationships"):
                resource["relationships"] = data["relationships"]
            self.items[resource_id] = resource
            return jsonapi_response(resource, status_code=201)
        return httpx.Response(405)

    def handle_item(self, request: httpx.Request, resource_id: str) -> httpx.Response:
        resource = self.items.get(resource_id)
        if resource is None:
            return jsonapi_error(404, f"{self.resource_type} {resource_id} not found")
        if request.method == "GET":
            return jsonapi_response(resource)
        if request.method == "PATCH":
            data = request_json(request)["data"]
            resource["attributes"].update(data.get("attributes", {}))
            return jsonapi_response(resource)
        if request.method == "DELETE":
            del self.items[resource_id]
            return httpx.Response(204)
        return httpx.Response(405)


class FixtureServer:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Handler] = {}
        self._stores: dict[str, ResourceStore] = {}

    def handle(self, pattern: str, handler: Handler) -> None:
        """Register ``handler`` for ``pattern`` (e.g. ``"GET /api/v1/organization"``)."""
        self._routes[pattern] = handler

    def mount(self, path: str, store: ResourceStore) -> ResourceStore:
        """Serve ``store`` at ``path`` (collection) and ``path/{id}`` (items)."""
        self._stores[path.rstrip("/")] = store
        return store

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._dispatch)

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport())

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        handler = self._routes.get(f"{request.method} {path}")
        if handler is not None:
            return handler(request)

        if path in self._stores:
            return self._stores[path].handle_collection(request)
        parent, _, resource_id = path.rpartition("/")
        if parent in self._stores:
            return self._stores[parent].handle_item(request, resource_id)

        return jsonapi_error(404, f"no route for {request.method} {path}")
