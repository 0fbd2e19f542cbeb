from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class OrganizationVariable(AuditMixin, Resource):
    """Organization-wide variable inherited by every workspace (a "globalvar")."""

    resource_type: ClassVar[str] = "globalvar"

    key: str = ""
    value: str = ""
    description: str = ""
    category: str = ""
    sensitive: bool = False
    hcl: bool = False
