"""Entity <-> JSON:API envelope conversion.

Outbound, an entity becomes ``{"data": {type, id, attributes, relationships}}``.
Relationships are sent as linkage only (type + id). Attributes that are
``None`` are left out; every other value, including ``False`` booleans, is
always sent.

Inbound, documents are first validated against the models in
``terrakube.schemas.jsonapi``; attributes are then mapped onto the entity
fields through their wire aliases. Related resources are populated from the
document's ``included`` section when present, otherwise with their id only.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, TypeVar

from terrakube.models.base import Resource
from terrakube.schemas.jsonapi import (
    JSONAPIListResponse,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
    JSONAPISingleResponse,
)

R = TypeVar("R", bound=Resource)

_IncludedIndex = dict[tuple[str, str], JSONAPIResource]


# ---------------------------------------------------------------------------
# Marshal
# ---------------------------------------------------------------------------


def _linkage(entity: Resource) -> dict[str, str]:
    return {"type": type(entity).resource_type, "id": entity.id}


def marshal_resource(entity: Resource) -> dict[str, Any]:
    """Build the JSON:API resource object for ``entity``."""
    model = type(entity)
    rel_fields = set(model.relationship_fields)

    attributes = entity.model_dump(
        mode="json",
        by_alias=True,
        exclude={"id", *rel_fields},
        exclude_none=True,
    )
    resource: dict[str, Any] = {"type": model.resource_type}
    if entity.id:
        resource["id"] = entity.id
    resource["attributes"] = attributes

    relationships: dict[str, Any] = {}
    for name in model.relationship_fields:
        related = getattr(entity, name)
        if related is None:
            continue
        if isinstance(related, list):
            relationships[model.wire_name(name)] = {"data": [_linkage(r) for r in related]}
        else:
            relationships[model.wire_name(name)] = {"data": _linkage(related)}
    if relationships:
        resource["relationships"] = relationships

    return resource


def marshal_payload(entity: Resource) -> bytes:
    """Serialize ``entity`` as a JSON:API single-resource document."""
    if not isinstance(entity, Resource):
        msg = f"expected a Resource instance, got {type(entity).__name__}"
        raise TypeError(msg)
    return json.dumps({"data": marshal_resource(entity)}).encode("utf-8")


# ---------------------------------------------------------------------------
# Unmarshal
# ---------------------------------------------------------------------------


def _index_included(included: Iterable[JSONAPIResource] | None) -> _IncludedIndex:
    return {(r.type, r.id): r for r in included or () if r.id}


def _resolve_related(
    identifier: JSONAPIResourceIdentifier,
    model: type[R],
    included: _IncludedIndex,
) -> R:
    resource = included.get((identifier.type, identifier.id))
    if resource is None:
        return model.model_validate({"id": identifier.id})
    # Related resources are populated one level deep; their own links stay as ids.
    return unmarshal_resource(resource, model, {})


def unmarshal_resource(
    resource: JSONAPIResource,
    model: type[R],
    included: _IncludedIndex | None = None,
) -> R:
    """Populate a ``model`` instance from a validated resource object.

    Raises:
        pydantic.ValidationError: If the attributes do not fit ``model``.
    """
    included = included or {}
    values: dict[str, Any] = dict(resource.attributes)
    values["id"] = resource.id or ""

    relationships = resource.relationships or {}
    for name in model.relationship_fields:
        relationship = relationships.get(model.wire_name(name))
        if relationship is None or relationship.data is None:
            continue
        related_model = model.related_model(name)
        if isinstance(relationship.data, list):
            values[name] = [
                _resolve_related(ident, related_model, included) for ident in relationship.data
            ]
        else:
            values[name] = _resolve_related(relationship.data, related_model, included)

    return model.model_validate(values)


def unmarshal_payload(body: bytes, model: type[R]) -> R:
    """Decode a single-resource document into a ``model`` instance."""
    document = JSONAPISingleResponse.model_validate_json(body)
    return unmarshal_resource(document.data, model, _index_included(document.included))


def unmarshal_many_payload(body: bytes, model: type[R]) -> list[R]:
    """Decode a collection document, preserving server order."""
    document = JSONAPIListResponse.model_validate_json(body)
    included = _index_included(document.included)
    return [unmarshal_resource(resource, model, included) for resource in document.data]
