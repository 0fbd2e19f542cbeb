"""Private registry module endpoints: ``/api/v1/organization/{org}/module[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.module import Module


class ModuleService(CrudService[Module]):
    model = Module
    filter_key = "filter[module]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[Module]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "module"), options)

    def get(self, organization_id: str, id: str) -> Module:
        """Retrieve a module; ``vcs``/``ssh`` are populated from ``included`` when sent."""
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "module", id))

    def create(self, organization_id: str, module: Module) -> Module:
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "module"), module)

    def update(self, organization_id: str, module: Module) -> Module:
        validate_id("organization_id", organization_id)
        validate_id("module.id", module.id)
        return self._update(
            self.client.api_path("organization", organization_id, "module", module.id),
            module,
        )

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "module", id))
