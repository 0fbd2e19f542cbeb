"""SSH key endpoints: ``/api/v1/organization/{org}/ssh[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.ssh import SSH


class SSHService(CrudService[SSH]):
    model = SSH
    filter_key = "filter[ssh]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[SSH]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "ssh"), options)

    def get(self, organization_id: str, id: str) -> SSH:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "ssh", id))

    def create(self, organization_id: str, ssh: SSH) -> SSH:
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "ssh"), ssh)

    def update(self, organization_id: str, ssh: SSH) -> SSH:
        validate_id("organization_id", organization_id)
        validate_id("ssh.id", ssh.id)
        return self._update(self.client.api_path("organization", organization_id, "ssh", ssh.id), ssh)

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "ssh", id))
