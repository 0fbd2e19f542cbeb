from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class VCS(AuditMixin, Resource):
    """Version control system connection used to fetch workspace and module sources."""

    resource_type: ClassVar[str] = "vcs"

    name: str = ""
    description: str = ""
    vcs_type: str = ""
    connection_type: str = ""
    client_id: str = ""
    client_secret: str = ""
    private_key: str = ""
    endpoint: str = ""
    api_url: str = ""
    status: str = ""
    callback: str | None = None
    access_token: str | None = None
    redirect_url: str | None = None
