"""Workspace tag endpoints.

Path: ``/api/v1/organization/{org}/workspace/{ws}/workspaceTag[/{id}]``.
"""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.workspace_tag import WorkspaceTag


class WorkspaceTagService(CrudService[WorkspaceTag]):
    """Attach and detach organization tags on a workspace."""

    model = WorkspaceTag
    filter_key = "filter[workspacetag]"

    def _path(self, organization_id: str, workspace_id: str, *rest: str) -> str:
        return self.client.api_path("organization", organization_id, "workspace", workspace_id, "workspaceTag", *rest)

    def list(
        self,
        organization_id: str,
        workspace_id: str,
        options: ListOptions | None = None,
    ) -> list[WorkspaceTag]:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        return self._list(self._path(organization_id, workspace_id), options)

    def get(self, organization_id: str, workspace_id: str, id: str) -> WorkspaceTag:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("id", id)
        return self._get(self._path(organization_id, workspace_id, id))

    def create(self, organization_id: str, workspace_id: str, tag: WorkspaceTag) -> WorkspaceTag:
        """Attach the tag named by ``tag.tag_id`` to the workspace."""
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        return self._create(self._path(organization_id, workspace_id), tag)

    def update(self, organization_id: str, workspace_id: str, tag: WorkspaceTag) -> WorkspaceTag:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("tag.id", tag.id)
        return self._update(self._path(organization_id, workspace_id, tag.id), tag)

    def delete(self, organization_id: str, workspace_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("workspace_id", workspace_id)
        validate_id("id", id)
        self._delete(self._path(organization_id, workspace_id, id))
