"""Exception hierarchy for the Terrakube client.

Failures fall into disjoint kinds that callers branch on by type:

- ``ValidationError`` -- a required identifier argument was empty. Raised
  before any request is sent.
- ``TransportError`` -- the HTTP exchange itself failed (DNS, TLS, timeout,
  connection reset).
- ``APIError`` -- the server answered with a non-2xx status.
- ``DecodeError`` -- the server answered 2xx but the body does not fit the
  expected shape.
- ``EncodeError`` -- the request body could not be serialized.

``is_not_found``, ``is_conflict`` and ``is_unauthorized`` inspect the whole
exception chain, so an ``APIError`` re-raised under another exception with
``raise ... from err`` is still recognised.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from terrakube.schemas.jsonapi import JSONAPIError


class TerrakubeError(Exception):
    """Base class for every error raised by this library."""


class APIError(TerrakubeError):
    """Non-2xx response from the Terrakube API.

    Args:
        method: HTTP method of the failed request.
        path: URL path of the failed request.
        status_code: HTTP status returned by the server.
        body: Raw response body, kept even when it is not a JSON:API
            error document.
        errors: Parsed ``errors`` entries, empty when the body carried none.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        body: bytes = b"",
        errors: list[JSONAPIError] | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        self.errors = list(errors or [])
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.errors and self.errors[0].detail:
            return f"{self.method} {self.path}: {self.status_code} {self.errors[0].detail}"
        return f"{self.method} {self.path}: {self.status_code}"


class ValidationError(TerrakubeError):
    """Client-side validation failure for a required argument."""

    def __init__(self, field: str, message: str = "must not be empty") -> None:
        self.field = field
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"validation error: {self.field} {self.message}"


class TransportError(TerrakubeError):
    """The request could not be completed at the HTTP transport level."""


class EncodeError(TerrakubeError):
    """A request body could not be serialized."""


class DecodeError(TerrakubeError):
    """A successful response body did not match the expected payload shape."""


def _iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and every exception it was raised from or during."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__ or err.__context__


def _find_api_error(err: BaseException | None) -> APIError | None:
    for exc in _iter_chain(err):
        if isinstance(exc, APIError):
            return exc
    return None


def _has_status(err: BaseException | None, status_code: int) -> bool:
    api_err = _find_api_error(err)
    return api_err is not None and api_err.status_code == status_code


def is_not_found(err: BaseException | None) -> bool:
    """Return True if ``err`` is, or wraps, a 404 ``APIError``."""
    return _has_status(err, 404)


def is_conflict(err: BaseException | None) -> bool:
    """Return True if ``err`` is, or wraps, a 409 ``APIError``."""
    return _has_status(err, 409)


def is_unauthorized(err: BaseException | None) -> bool:
    """Return True if ``err`` is, or wraps, a 401 ``APIError``."""
    return _has_status(err, 401)
