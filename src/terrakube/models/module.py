from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource
from terrakube.models.ssh import SSH
from terrakube.models.vcs import VCS


class Module(AuditMixin, Resource):
    """Private registry module, optionally linked to a VCS connection or SSH key."""

    resource_type: ClassVar[str] = "module"
    relationship_fields: ClassVar[tuple[str, ...]] = ("vcs", "ssh")

    name: str = ""
    description: str = ""
    provider: str = ""
    source: str = ""
    folder: str | None = None
    tag_prefix: str | None = None
    download_quantity: int = 0
    latest_version: str | None = None
    registry_path: str | None = None
    vcs: VCS | None = None
    ssh: SSH | None = None
