from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class Organization(AuditMixin, Resource):
    """Top-level tenant that owns workspaces, modules, teams, and templates."""

    resource_type: ClassVar[str] = "organization"

    name: str = ""
    description: str | None = None
    execution_mode: str = ""
    disabled: bool = False
    icon: str | None = None
