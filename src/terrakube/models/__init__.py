from terrakube.models.base import AuditMixin, Resource
from terrakube.models.job import Job
from terrakube.models.module import Module
from terrakube.models.organization import Organization
from terrakube.models.organization_variable import OrganizationVariable
from terrakube.models.ssh import SSH
from terrakube.models.tag import Tag
from terrakube.models.team import Team
from terrakube.models.team_token import TeamToken
from terrakube.models.template import Template
from terrakube.models.variable import Variable
from terrakube.models.vcs import VCS
from terrakube.models.workspace import Workspace
from terrakube.models.workspace_tag import WorkspaceTag

__all__ = [
    "Resource",
    "AuditMixin",
    "Job",
    "Module",
    "Organization",
    "OrganizationVariable",
    "SSH",
    "Tag",
    "Team",
    "TeamToken",
    "Template",
    "VCS",
    "Variable",
    "Workspace",
    "WorkspaceTag",
]
