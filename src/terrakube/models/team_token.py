from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TeamToken(BaseModel):
    """Team access token served by the plain-JSON ``/access-token/v1/teams`` API.

    ``value`` is only populated in the response to a create call.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    description: str = ""
    days: int = 0
    hours: int = 0
    minutes: int = 0
    group: str = ""
    value: str = Field(default="", alias="token")
