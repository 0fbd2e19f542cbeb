"""Workspace variable endpoints.

Path: ``/api/v1/organization/{org}/workspace/{ws}/variable[/{id}]``.
"""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.variable import Variable


class VariableService(CrudService[Variable]):
    """CRUD operations for workspace variables.

    Identifiers are validated in path order: organization, workspace, then
    the variable itself.
    """

    model = Variable
    filter_key = "filter[variable]"

    def _path(self, organization_id: str, workspace_id: str, *rest: str) -> str:
        return self.client.api_path("organization", organization_id, "workspace", workspace_id, "variable", *rest)

    def list(
        self,
        organization_id: str,
        workspace_id: str,
        options: ListOptions | None = None,
    ) -> list[Variable]:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        return self._list(self._path(organization_id, workspace_id), options)

    def get(self, organization_id: str, workspace_id: str, id: str) -> Variable:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("id", id)
        return self._get(self._path(organization_id, workspace_id, id))

    def create(self, organization_id: str, workspace_id: str, variable: Variable) -> Variable:
        """Create a variable. ``sensitive`` and ``hcl`` are always sent."""
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        return self._create(self._path(organization_id, workspace_id), variable)

    def update(self, organization_id: str, workspace_id: str, variable: Variable) -> Variable:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("variable.id", variable.id)
        return self._update(self._path(organization_id, workspace_id, variable.id), variable)

    def delete(self, organization_id: str, workspace_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("id", id)
        self._delete(self._path(organization_id, workspace_id, id))
