from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource
from terrakube.models.workspace import Workspace


class Job(AuditMixin, Resource):
    """A plan/apply/destroy run queued against a workspace."""

    resource_type: ClassVar[str] = "job"
    relationship_fields: ClassVar[tuple[str, ...]] = ("workspace",)

    command: str = ""
    output: str = ""
    status: str = ""
    approval_team: str | None = None
    comments: str | None = None
    commit_id: str | None = None
    override_branch: str | None = None
    plan_changes: bool = False
    refresh: bool = False
    refresh_only: bool = False
    tcl: str | None = None
    template_reference: str | None = None
    terraform_plan: str | None = None
    via: str | None = None
    workspace: Workspace | None = None
