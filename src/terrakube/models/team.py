from __future__ import annotations

from typing import ClassVar

from terrakube.models.base import AuditMixin, Resource


class Team(AuditMixin, Resource):
    """Identity-provider group with per-area management permissions.

    Every ``manage_*`` flag is always sent, including ``False``; omitting
    one would leave the server-side permission unchanged.
    """

    resource_type: ClassVar[str] = "team"

    name: str = ""
    manage_state: bool = False
    manage_workspace: bool = False
    manage_module: bool = False
    manage_provider: bool = False
    manage_vcs: bool = False
    manage_template: bool = False
    manage_job: bool = False
    manage_collection: bool = False
