"""Job endpoints: ``/api/v1/organization/{org}/job[/{id}]``."""

from __future__ import annotations

from terrakube.crud import CrudService, ListOptions, validate_id
from terrakube.models.job import Job


class JobService(CrudService[Job]):
    """Queue and inspect runs.

    Creating a job schedules it on the server; the returned ``Job`` reflects
    the initial status only. Poll ``get`` for progress.
    """

    model = Job
    filter_key = "filter[job]"

    def list(self, organization_id: str, options: ListOptions | None = None) -> list[Job]:
        validate_id("organization_id", organization_id)
        return self._list(self.client.api_path("organization", organization_id, "job"), options)

    def get(self, organization_id: str, id: str) -> Job:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        return self._get(self.client.api_path("organization", organization_id, "job", id))

    def create(self, organization_id: str, job: Job) -> Job:
        """Queue ``job``; ``job.workspace`` must reference an existing workspace."""
        validate_id("organization_id", organization_id)
        return self._create(self.client.api_path("organization", organization_id, "job"), job)

    def update(self, organization_id: str, job: Job) -> Job:
        validate_id("organization_id", organization_id)
        validate_id("job.id", job.id)
        return self._update(self.client.api_path("organization", organization_id, "job", job.id), job)

    def delete(self, organization_id: str, id: str) -> None:
        validate_id("organization_id", organization_id)
        validate_id("id", id)
        self._delete(self.client.api_path("organization", organization_id, "job", id))
