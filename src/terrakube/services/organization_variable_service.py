"""Organization-wide variable endpoints: ``/api/v1/organization/{org}/globalvar[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.organization_variable import OrganizationVariable


class OrganizationVariableService(CrudService[OrganizationVariable]):
    model = OrganizationVariable
    filter_key = "filter[globalvar]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[OrganizationVariable]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "globalvar"), options)

    def get(self, organization_id: str, id: str) -> OrganizationVariable:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "globalvar", id))

    def create(self, organization_id: str, variable: OrganizationVariable) -> OrganizationVariable:
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "globalvar"), variable)

    def update(self, organization_id: str, variable: OrganizationVariable) -> OrganizationVariable:
        validate_id("organization_id", organization_id)
        validate_id("variable.id", variable.id)
        return self._update(
            self.client.api_path("organization", organization_id, "globalvar", variable.id),
            variable,
        )

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "globalvar", id))
