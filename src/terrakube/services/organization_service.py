"""Organization endpoints: ``/api/v1/organization[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.organization import Organization


class OrganizationService(CrudService[Organization]):
    """CRUD operations for organizations.

    Organizations are the root of every other resource path, so this is
    the only service whose list filter uses the generic ``filter`` key.
    """

    model = Organization

    def list(self, options: ListOptions | None = None) -> list[Organization]:
        """Return all organizations visible to the token, optionally filtered."""
        return self._list(self.client.api_path("organization"), options)

    def get(self, id: str) -> Organization:
        """Retrieve an organization by id.

        Raises:
            ValidationError: If ``id`` is empty.
            APIError: On a non-2xx response (404 when it does not exist).
        """
        validate_id("id", id)
        return self._get(self.client.api_path("organization", id))

    def create(self, organization: Organization) -> Organization:
        """Create an organization; the returned copy carries the server-assigned id."""
        return self._create(self.client.api_path("organization"), organization)

    def update(self, organization: Organization) -> Organization:
        """Update an organization. ``organization.id`` must be set.

        Raises:
            ValidationError: If ``organization.id`` is empty.
        """
        validate_id("organization.id", organization.id)
        return self._update(self.client.api_path("organization", organization.id), organization)

    def delete(self, id: str) -> None:
        validate_id("id", id)
        self._delete(self.client.api_path("organization", id))
