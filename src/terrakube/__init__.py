"""Python client for the Terrakube API.

Usage::

    from terrakube import Client, ListOptions

    with Client("terrakube.example.com", token) as client:
        workspaces = client.workspaces.list(org_id, ListOptions(filter="name==prod"))
"""

from terrakube.client import API_BASE_PATH, Client
from terrakube.config import ClientSettings, get_settings
from terrakube.crud import ListOptions
from terrakube.errors import (
    APIError,
    DecodeError,
    EncodeError,
    TerrakubeError,
    TransportError,
    ValidationError,
    is_conflict,
    is_not_found,
    is_unauthorized,
)
from terrakube.models import (
    SSH,
    VCS,
    Job,
    Module,
    Organization,
    OrganizationVariable,
    Tag,
    Team,
    TeamToken,
    Template,
    Variable,
    Workspace,
    WorkspaceTag,
)
from terrakube.schemas.atomic import (
    AtomicRequest,
    AtomicResult,
    Operation,
    OperationAction,
    OperationRef,
)

__version__ = "0.1.0"

__all__ = [
    "API_BASE_PATH",
    "APIError",
    "AtomicRequest",
    "AtomicResult",
    "Client",
    "ClientSettings",
    "DecodeError",
    "EncodeError",
    "Job",
    "ListOptions",
    "Module",
    "Operation",
    "OperationAction",
    "OperationRef",
    "Organization",
    "OrganizationVariable",
    "SSH",
    "Tag",
    "Team",
    "TeamToken",
    "Template",
    "TerrakubeError",
    "TransportError",
    "VCS",
    "ValidationError",
    "Variable",
    "Workspace",
    "WorkspaceTag",
    "get_settings",
    "is_conflict",
    "is_not_found",
    "is_unauthorized",
]
