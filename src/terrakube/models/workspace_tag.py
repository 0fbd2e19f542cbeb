from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class WorkspaceTag(AuditMixin, Resource):
    """Association between a workspace and an organization tag."""

    resource_type: ClassVar[str] = "workspacetag"

    tag_id: str = ""
