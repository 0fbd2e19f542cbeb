from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class Tag(AuditMixin, Resource):
    resource_type: ClassVar[str] = "tag"

    name: str = ""
