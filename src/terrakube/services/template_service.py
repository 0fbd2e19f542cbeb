"""Job template endpoints: ``/api/v1/organization/{org}/template[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.template import Template


class TemplateService(CrudService[Template]):
    model = Template
    filter_key = "filter[template]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[Template]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "template"), options)

    def get(self, organization_id: str, id: str) -> Template:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "template", id))

    def create(self, organization_id: str, template: Template) -> Template:
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "template"), template)

    def update(self, organization_id: str, template: Template) -> Template:
        validate_id("organization_id", organization_id)
        validate_id("template.id", template.id)
        return self._update(self.client.api_path("organization", organization_id, "template", template.id), template)

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "template", id))
