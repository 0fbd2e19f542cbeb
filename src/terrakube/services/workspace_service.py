"""Workspace endpoints: ``/api/v1/organization/{org}/workspace[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.workspace import Workspace


class WorkspaceService(CrudService[Workspace]):
    """CRUD operations for workspaces within an organization.

    Every method validates ``organization_id`` first, then the workspace id,
    before any request is sent.
    """

    model = Workspace
    filter_key = "filter[workspace]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[Workspace]:
        """List the workspaces of an organization, optionally filtered.

        Args:
            organization_id: Owning organization.
            options: Filter applied under ``filter[workspace]``.

        Raises:
            ValidationError: If ``organization_id`` is empty.
            APIError: On a non-2xx response.
        """
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "workspace"), options)

    def get(self, organization_id: str, id: str) -> Workspace:
        """Retrieve a workspace by id.

        Raises:
            ValidationError: If ``organization_id`` or ``id`` is empty.
            APIError: On a non-2xx response (404 when it does not exist).
        """
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "workspace", id))

    def create(self, organization_id: str, workspace: Workspace) -> Workspace:
        """Create a workspace. A ``vcs`` relationship is sent as linkage only."""
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "workspace"), workspace)

    def update(self, organization_id: str, workspace: Workspace) -> Workspace:
        """Update a workspace. ``workspace.id`` must be set."""
        validate_id("organization_id", organization_id)
        validate_id("workspace.id", workspace.id)
        return self._update(
            self.client.api_path("organization", organization_id, "workspace", workspace.id),
            workspace,
        )

    def delete(self, organization_id: str, id: str) -> None:
        """Delete a workspace by id."""
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "workspace", id))
