from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from terrakube.models.base import AuditMixin, Resource
from terrakube.models.vcs import VCS


class Workspace(AuditMixin, Resource):
    """Unit of infrastructure state: a source, a branch, and an IaC tool version."""

    resource_type: ClassVar[str] = "workspace"
    relationship_fields: ClassVar[tuple[str, ...]] = ("vcs",)

    name: str = ""
    description: str | None = None
    source: str = ""
    branch: str = ""
    folder: str = ""
    template_id: str = Field(default="", alias="defaultTemplate")
    iac_type: str = ""
    iac_version: str = Field(default="", alias="terraformVersion")
    execution_mode: str = ""
    deleted: bool = False
    locked: bool = False
    allow_remote_apply: bool = False
    lock_description: str | None = None
    module_ssh_key: str | None = None
    last_job_status: str | None = None
    last_job_date: str | None = None
    vcs: VCS | None = None
