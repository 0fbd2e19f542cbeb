"""Team endpoints: ``/api/v1/organization/{org}/team[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.team import Team


class TeamService(CrudService[Team]):
    """CRUD operations for organization teams and their permission flags."""

    model = Team
    filter_key = "filter[team]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[Team]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "team"), options)

    def get(self, organization_id: str, id: str) -> Team:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "team", id))

    def create(self, organization_id: str, team: Team) -> Team:
        """Create a team. Unset permission flags are sent as ``false``."""
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "team"), team)

    def update(self, organization_id: str, team: Team) -> Team:
        """Update a team. All permission flags are sent, so pass the full desired state."""
        validate_id("organization_id", organization_id)
        validate_id("team.id", team.id)
        return self._update(self.client.api_path("organization", organization_id, "team", team.id), team)

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "team", id))
