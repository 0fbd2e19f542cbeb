"""Terrakube API client: configuration, request building, and response decoding.

``Client`` owns the immutable connection settings (endpoint, token, user
agent, transport) and the two primitives every resource service is built on:

- ``build_request`` -- resolves a path against the endpoint, attaches auth
  and media-type headers, and encodes the body for the chosen protocol.
- ``send`` -- executes a request, maps non-2xx responses to ``APIError``,
  and decodes 2xx bodies into the caller's expected shape.

Each request is a single blocking HTTP call; nothing is retried or cached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from terrakube.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientSettings, get_settings
from terrakube.errors import APIError, DecodeError, EncodeError, TransportError
from terrakube.protocol import JSONAPI, WireProtocol
from terrakube.schemas.jsonapi import JSONAPIError, JSONAPIErrorResponse
from terrakube.services.job_service import JobService
from terrakube.services.module_service import ModuleService
from terrakube.services.operations_service import OperationsService
from terrakube.services.organization_service import OrganizationService
from terrakube.services.organization_variable_service import OrganizationVariableService
from terrakube.services.ssh_service import SSHService
from terrakube.services.tag_service import TagService
from terrakube.services.team_service import TeamService
from terrakube.services.team_token_service import TeamTokenService
from terrakube.services.template_service import TemplateService
from terrakube.services.variable_service import VariableService
from terrakube.services.vcs_service import VCSService
from terrakube.services.workspace_service import WorkspaceService
from terrakube.services.workspace_tag_service import WorkspaceTagService

logger = logging.getLogger(__name__)

API_BASE_PATH = "/api/v1/"


def _parse_error_details(body: bytes) -> list[JSONAPIError]:
    """Extract ``errors`` entries from a failure body, or nothing if it has none."""
    try:
        return JSONAPIErrorResponse.model_validate_json(body).errors
    except ValueError:
        return []


class Client:
    """Synchronous client for the Terrakube API.

    Resource services are exposed as attributes (``client.organizations``,
    ``client.workspaces``, ...). Connection settings are fixed at
    construction; the instance can be shared between threads.

    Args:
        endpoint: Terrakube server URL. ``https://`` is assumed when the
            scheme is missing.
        token: Bearer token sent with every request.
        http_client: Pre-configured ``httpx.Client`` to send requests with.
            It is not closed by ``close()``.
        user_agent: ``User-Agent`` header value.
        insecure_tls: Skip TLS certificate verification on the default
            transport. Cannot be combined with ``http_client``.
        timeout: Timeout in seconds for the default transport.

    Raises:
        ValueError: If endpoint or token is empty, the endpoint is not a
            valid URL, or ``insecure_tls`` is combined with ``http_client``.
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        *,
        http_client: httpx.Client | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        insecure_tls: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not endpoint:
            raise ValueError("endpoint is required")
        if not token:
            raise ValueError("token is required")
        if insecure_tls and http_client is not None:
            raise ValueError("insecure_tls only applies to the default transport; configure verify on http_client instead")

        if not endpoint.startswith(("http://", "https://")):
            endpoint = f"https://{endpoint}"
        try:
            base_url = httpx.URL(endpoint)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid endpoint URL: {exc}") from exc
        if not base_url.host:
            raise ValueError(f"invalid endpoint URL: {endpoint!r} has no host")

        self._base_url = base_url
        self._token = token
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._owns_http_client = http_client is None
        if insecure_tls:
            logger.warning("TLS certificate verification disabled for %s", base_url.host)
        self._http_client = http_client or httpx.Client(verify=not insecure_tls, timeout=timeout)

        self.organizations = OrganizationService(self)
        self.workspaces = WorkspaceService(self)
        self.modules = ModuleService(self)
        self.teams = TeamService(self)
        self.team_tokens = TeamTokenService(self)
        self.variables = VariableService(self)
        self.organization_variables = OrganizationVariableService(self)
        self.templates = TemplateService(self)
        self.tags = TagService(self)
        self.vcs = VCSService(self)
        self.ssh = SSHService(self)
        self.jobs = JobService(self)
        self.workspace_tags = WorkspaceTagService(self)
        self.operations = OperationsService(self)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> Client:
        """Build a client from ``TERRAKUBE_*`` settings (cached env settings by default)."""
        settings = settings or get_settings()
        return cls(
            settings.endpoint,
            settings.token,
            http_client=http_client,
            user_agent=settings.user_agent,
            insecure_tls=settings.insecure_tls,
            timeout=settings.timeout,
        )

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(endpoint={str(self._base_url)!r})"

    # ------------------------------------------------------------------
    # Request building / response decoding
    # ------------------------------------------------------------------

    def api_path(self, *segments: str) -> str:
        """Join ``segments`` under ``/api/v1/``.

        Each segment is percent-escaped as a single path segment, so an
        identifier containing ``/``, ``?`` or ``#`` cannot leave its template.
        """
        return API_BASE_PATH + "/".join(quote(segment, safe="") for segment in segments)

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        protocol: WireProtocol = JSONAPI,
    ) -> httpx.Request:
        """Compose an authenticated request; performs no I/O.

        ``path`` is resolved against the endpoint as a URL reference, so an
        absolute path replaces the endpoint's own path. ``params=None``
        yields a URL with no query string.

        Raises:
            EncodeError: If ``body`` cannot be serialized for ``protocol``.
        """
        url = self._base_url.join(path)
        headers = {
            "Authorization": f"Bearer {self._token}",
            "User-Agent": self._user_agent,
            "Accept": protocol.media_type,
        }

        content: bytes | None = None
        if body is not None:
            try:
                content = protocol.encode(body)
            except (TypeError, ValueError) as exc:
                raise EncodeError(f"marshaling {protocol.name} request body: {exc}") from exc
            headers["Content-Type"] = protocol.media_type

        return self._http_client.build_request(
            method,
            url,
            params=params,
            headers=headers,
            content=content,
        )

    def send(
        self,
        request: httpx.Request,
        shape: Any = None,
        *,
        many: bool = False,
        protocol: WireProtocol = JSONAPI,
    ) -> Any:
        """Execute ``request`` and decode the response into ``shape``.

        With ``shape=None`` the body is discarded. An empty 2xx body also
        decodes to ``None``.

        Raises:
            TransportError: If the HTTP exchange fails.
            APIError: If the response status is not 2xx.
            DecodeError: If a 2xx body does not fit ``shape``.
        """
        try:
            response = self._http_client.send(request)
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.url.path}: {exc}") from exc

        body = response.content
        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)

        if not response.is_success:
            api_err = APIError(
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                body=body,
                errors=_parse_error_details(body),
            )
            logger.warning("Terrakube API request failed: %s", api_err)
            raise api_err

        if shape is None or not body:
            return None

        try:
            return protocol.decode(body, shape, many)
        except ValueError as exc:
            kind = "list response" if many else "response"
            raise DecodeError(f"decoding {protocol.name} {kind}: {exc}") from exc

    def request(
        self,
        method: str,
        path: str,
        shape: Any = None,
        *,
        many: bool = False,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        protocol: WireProtocol = JSONAPI,
    ) -> Any:
        """Build and send a request in one step."""
        request = self.build_request(method, path, params=params, body=body, protocol=protocol)
        return self.send(request, shape, many=many, protocol=protocol)
