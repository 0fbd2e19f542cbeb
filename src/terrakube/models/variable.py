from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class Variable(AuditMixin, Resource):
    """Workspace-scoped Terraform or environment variable."""

    resource_type: ClassVar[str] = "variable"

    key: str = ""
    value: str = ""
    description: str = ""
    category: str = ""
    sensitive: bool = False
    hcl: bool = False
