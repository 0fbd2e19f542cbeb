from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from terrakube.models.base import AuditMixin, Resource


class Template(AuditMixin, Resource):
    """Job template; ``content`` holds the TCL flow definition."""

    resource_type: ClassVar[str] = "template"

    name: str = ""
    description: str | None = None
    version: str | None = None
    content: str = Field(default="", alias="tcl")
