"""Team access token endpoints.

Unlike the rest of the API these live outside ``/api/v1`` and speak plain
JSON: ``POST``/``GET /access-token/v1/teams`` and
``DELETE /access-token/v1/teams/{id}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from terrakube.crud import validate_id
from terrakube.errors import DecodeError
from terrakube.models.team_token import TeamToken
from terrakube.protocol import PLAIN_JSON

if TYPE_CHECKING:
    from terrakube.client import Client

TEAM_TOKEN_BASE_PATH = "/access-token/v1/teams"


class TeamTokenService:
    """Issue, list, and revoke team tokens.

    Args:
        client: Client used to send the requests.
    """

    def __init__(self, client: Client) -> None:
        self.client = client

    def create(self, token: TeamToken) -> TeamToken:
        """Issue a token for ``token.group``.

        The secret is only returned here, in ``TeamToken.value``.

        Raises:
            APIError: On a non-2xx response.
            DecodeError: If the server returns no token.
        """
        created = self.client.request(
            "POST",
            TEAM_TOKEN_BASE_PATH,
            TeamToken,
            body=token,
            protocol=PLAIN_JSON,
        )
        if created is None:
            raise DecodeError(f"POST {TEAM_TOKEN_BASE_PATH}: empty response body, expected a team token")
        return created

    def list(self) -> list[TeamToken]:
        """Return the team tokens visible to the caller, without their secrets."""
        tokens = self.client.request("GET", TEAM_TOKEN_BASE_PATH, TeamToken, many=True, protocol=PLAIN_JSON)
        return tokens or []

    def delete(self, id: str) -> None:
        validate_id("id", id)
        path = "/".join((TEAM_TOKEN_BASE_PATH, quote(id, safe="")))
        self.client.request("DELETE", path, protocol=PLAIN_JSON)
