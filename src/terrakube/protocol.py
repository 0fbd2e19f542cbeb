"""Wire protocol strategies shared by the request builder and response decoder.

Terrakube serves two body conventions over the same transport:

- ``JSONAPI`` -- ``application/vnd.api+json``; bodies are JSON:API envelopes.
- ``PLAIN_JSON`` -- ``application/json``; bodies are bare JSON values. Used by
  the team-token API and the atomic operations endpoint.

Each strategy bundles the media type with the functions that encode a request
body and decode a response body, so the client never branches on the protocol
itself.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter

from terrakube.codec import marshal_payload, unmarshal_many_payload, unmarshal_payload

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class WireProtocol:
    """Body conventions for one family of endpoints.

    Attributes:
        name: Label used in log lines and error messages.
        media_type: Value for both ``Content-Type`` and ``Accept``.
        encode: Turns a request body value into bytes. May raise
            ``TypeError`` or ``ValueError``.
        decode: ``decode(body, shape, many)`` turns response bytes into
            ``shape`` (or a list of it when ``many``). Raises ``ValueError``
            (including ``pydantic.ValidationError``) on a shape mismatch.
    """

    name: str
    media_type: str
    encode: Callable[[Any], bytes]
    decode: Callable[[bytes, Any, bool], Any]


def _decode_jsonapi(body: bytes, shape: Any, many: bool) -> Any:
    if many:
        return unmarshal_many_payload(body, shape)
    return unmarshal_payload(body, shape)


def _encode_json(body: Any) -> bytes:
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _decode_json(body: bytes, shape: Any, many: bool) -> Any:
    adapter: TypeAdapter[Any] = TypeAdapter(list[shape] if many else shape)
    return adapter.validate_json(body)


JSONAPI = WireProtocol(
    name="JSON:API",
    media_type=JSONAPI_MEDIA_TYPE,
    encode=marshal_payload,
    decode=_decode_jsonapi,
)

PLAIN_JSON = WireProtocol(
    name="JSON",
    media_type=JSON_MEDIA_TYPE,
    encode=_encode_json,
    decode=_decode_json,
)
