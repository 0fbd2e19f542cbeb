"""VCS connection endpoints: ``/api/v1/organization/{org}/vcs[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.vcs import VCS


class VCSService(CrudService[VCS]):
    model = VCS
    filter_key = "filter[vcs]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[VCS]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "vcs"), options)

    def get(self, organization_id: str, id: str) -> VCS:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "vcs", id))

    def create(self, organization_id: str, vcs: VCS) -> VCS:
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "vcs"), vcs)

    def update(self, organization_id: str, vcs: VCS) -> VCS:
        """Update a VCS connection. Secrets left empty are sent as empty strings."""
        validate_id("organization_id", organization_id)
        validate_id("vcs.id", vcs.id)
        return self._update(self.client.api_path("organization", organization_id, "vcs", vcs.id), vcs)

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "vcs", id))
