"""JSON:API document models using Pydantic v2.

Mirrors the data/type/id/attributes/relationships structure that the
Terrakube API uses for every resource endpoint. Responses are validated
against these models before entity shapes are populated from them.

Reference: https://jsonapi.org/format/
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class JSONAPIResourceIdentifier(BaseModel):
    """Linkage object naming a related resource by type and id."""

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """A relationship entry; ``data`` is to-one, to-many, or null."""

    data: JSONAPIResourceIdentifier | list[JSONAPIResourceIdentifier] | None = None
    links: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


class JSONAPIResource(BaseModel):
    """A single JSON:API resource object.

    ``id`` is absent on client-built create payloads; the server assigns it.
    """

    type: str
    id: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, JSONAPIRelationship] | None = None


class JSONAPISingleResponse(BaseModel):
    """JSON:API document containing a single primary resource."""

    data: JSONAPIResource
    included: list[JSONAPIResource] | None = None


class JSONAPIListResponse(BaseModel):
    """JSON:API document containing a list of primary resources."""

    data: list[JSONAPIResource]
    included: list[JSONAPIResource] | None = None
    meta: dict[str, Any] | None = None
    links: dict[str, Any] | None = None


class JSONAPIError(BaseModel):
    """A single JSON:API error object."""

    detail: str | None = None
    title: str | None = None
    status: str | None = None
    source: dict[str, Any] | None = None


class JSONAPIErrorResponse(BaseModel):
    """JSON:API document containing a list of errors."""

    errors: list[JSONAPIError]
