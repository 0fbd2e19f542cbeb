from __future__ import annotations

import types
import typing
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Resource(BaseModel):
    """Base for Terrakube entity shapes carried in JSON:API envelopes.

    Subclasses set ``resource_type`` to the JSON:API ``type`` and list the
    fields that travel as relationships (rather than attributes) in
    ``relationship_fields``. Every other field except ``id`` is an attribute;
    its wire name is the camelCase alias unless a field overrides it.

    ``id`` is empty on entities that have not been created yet.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    resource_type: ClassVar[str] = ""
    relationship_fields: ClassVar[tuple[str, ...]] = ()

    id: str = ""

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        """Return the JSON name of ``field_name``."""
        return cls.model_fields[field_name].alias or field_name

    @classmethod
    def related_model(cls, field_name: str) -> type[Resource]:
        """Return the Resource subclass a relationship field points at.

        Handles ``X | None`` and ``list[X] | None`` annotations.
        """
        annotation: Any = cls.model_fields[field_name].annotation
        pending = [annotation]
        while pending:
            candidate = pending.pop()
            if isinstance(candidate, type) and issubclass(candidate, Resource):
                return candidate
            if isinstance(candidate, types.UnionType) or typing.get_origin(candidate) is not None:
                pending.extend(typing.get_args(candidate))
        msg = f"{cls.__name__}.{field_name} is not a relationship to a Resource"
        raise TypeError(msg)


class AuditMixin(BaseModel):
    """Server-maintained audit attributes present on most Terrakube resources."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    created_by: str | None = None
    created_date: str | None = None
    updated_by: str | None = None
    updated_date: str | None = None
