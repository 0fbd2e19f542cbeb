"""Generic JSON:API CRUD engine shared by the resource services.

``CrudService`` is parameterized by an entity model; a resource service
subclasses it once, sets ``model`` and ``filter_key``, and builds the five
public operations out of ``_list``/``_get``/``_create``/``_update``/``_delete``
plus ``validate_id`` checks on every path identifier.

The engine itself trusts the path it is given: identifier validation is the
resource service's job and must happen, in path order, before delegating.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from terrakube.errors import DecodeError, ValidationError
from terrakube.models.base import Resource

if TYPE_CHECKING:
    from terrakube.client import Client

T = TypeVar("T", bound=Resource)

DEFAULT_FILTER_KEY = "filter"


class ListOptions(BaseModel):
    """Optional parameters for list calls.

    ``filter`` uses the server's RSQL filter grammar, e.g. ``name==prod``.
    An empty filter sends no query string at all.
    """

    model_config = ConfigDict(frozen=True)

    filter: str = ""


def validate_id(field: str, value: str) -> None:
    """Raise ``ValidationError`` naming ``field`` if ``value`` is empty."""
    if not value:
        raise ValidationError(field)


class CrudService(Generic[T]):
    """Base for JSON:API resource services.

    Attributes:
        model: Entity shape decoded from, and encoded into, JSON:API documents.
        filter_key: Query parameter carrying ``ListOptions.filter``; falls
            back to ``"filter"`` when unset.
    """

    model: type[T]
    filter_key: str | None = None

    def __init__(self, client: Client) -> None:
        self.client = client

    def _list(self, path: str, options: ListOptions | None = None) -> list[T]:
        params = None
        if options is not None and options.filter:
            params = {self.filter_key or DEFAULT_FILTER_KEY: options.filter}
        items = self.client.request("GET", path, self.model, many=True, params=params)
        return items or []

    def _get(self, path: str) -> T:
        return self._expect_resource(self.client.request("GET", path, self.model), "GET", path)

    def _create(self, path: str, entity: T) -> T:
        created = self.client.request("POST", path, self.model, body=entity)
        return self._expect_resource(created, "POST", path)

    def _update(self, path: str, entity: T) -> T:
        updated = self.client.request("PATCH", path, self.model, body=entity)
        return self._expect_resource(updated, "PATCH", path)

    def _delete(self, path: str) -> None:
        self.client.request("DELETE", path)

    def _expect_resource(self, result: T | None, method: str, path: str) -> T:
        if result is None:
            raise DecodeError(f"{method} {path}: empty response body, expected {self.model.resource_type}")
        return result
