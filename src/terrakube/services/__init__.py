"""Resource services -- one per Terrakube entity kind, built on CrudService."""

from terrakube.services.job_service import JobService
from terrakube.services.module_service import ModuleService
from terrakube.services.operations_service import OperationsService
from terrakube.services.organization_service import OrganizationService
from terrakube.services.organization_variable_service import OrganizationVariableService
from terrakube.services.ssh_service import SSHService
from terrakube.services.tag_service import TagService
from terrakube.services.team_service import TeamService
from terrakube.services.team_token_service import TeamTokenService
from terrakube.services.template_service import TemplateService
from terrakube.services.variable_service import VariableService
from terrakube.services.vcs_service import VCSService
from terrakube.services.workspace_service import WorkspaceService
from terrakube.services.workspace_tag_service import WorkspaceTagService

__all__ = [
    "JobService",
    "ModuleService",
    "OperationsService",
    "OrganizationService",
    "OrganizationVariableService",
    "SSHService",
    "TagService",
    "TeamService",
    "TeamTokenService",
    "TemplateService",
    "VCSService",
    "VariableService",
    "WorkspaceService",
    "WorkspaceTagService",
]
