"""Organization tag endpoints: ``/api/v1/organization/{org}/tag[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.tag import Tag


class TagService(CrudService[Tag]):
    model = Tag
    filter_key = "filter[tag]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[Tag]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "tag"), options)

    def get(self, organization_id: str, id: str) -> Tag:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "tag", id))

    def create(self, organization_id: str, tag: Tag) -> Tag:
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "tag"), tag)

    def update(self, organization_id: str, tag: Tag) -> Tag:
        validate_id("organization_id", organization_id)
        validate_id("tag.id", tag.id)
        return self._update(self.client.api_path("organization", organization_id, "tag", tag.id), tag)

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "tag", id))
