from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class SSH(AuditMixin, Resource):
    """SSH private key stored at organization level for git access."""

    resource_type: ClassVar[str] = "ssh"

    name: str = ""
    description: str | None = None
    private_key: str = ""
    ssh_type: str = ""
