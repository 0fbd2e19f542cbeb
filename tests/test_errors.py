from __future__ import annotations

import pytest

from terrakube import (
    APIError,
    DecodeError,
    TerrakubeError,
    ValidationError,
    is_conflict,
    is_not_found,
    is_unauthorized,
)
from terrakube.schemas.jsonapi import JSONAPIError


class WrappedError(Exception):
    pass


def _wrap(err: Exception) -> Exception:
    """Re-raise ``err`` under two layers of added context and return the outer error."""
    try:
        try:
            raise err
        except APIError as inner:
            raise WrappedError("loading workspace") from inner
    except WrappedError as middle:
        try:
            raise RuntimeError("sync failed") from middle
        except RuntimeError as outer:
            return outer


def test_api_error_message_includes_first_detail():
    err = APIError(
        "GET",
        "/api/v1/organization/x",
        404,
        errors=[JSONAPIError(detail="organization not found", status="404"), JSONAPIError(detail="ignored")],
    )
    assert str(err) == "GET /api/v1/organization/x: 404 organization not found"


def test_api_error_message_without_details():
    err = APIError("DELETE", "/api/v1/organization/x", 500, body=b"boom")
    assert str(err) == "DELETE /api/v1/organization/x: 500"
    assert err.body == b"boom"
    assert err.errors == []


def test_validation_error_message():
    err = ValidationError("organization_id")
    assert err.field == "organization_id"
    assert err.message == "must not be empty"
    assert str(err) == "validation error: organization_id must not be empty"


def test_error_kinds_are_disjoint():
    api_err = APIError("GET", "/", 404)
    validation_err = ValidationError("id")
    assert isinstance(api_err, TerrakubeError)
    assert isinstance(validation_err, TerrakubeError)
    assert not isinstance(api_err, ValidationError)
    assert not isinstance(validation_err, APIError)
    assert not issubclass(DecodeError, APIError)


@pytest.mark.parametrize(
    ("status", "not_found", "conflict", "unauthorized"),
    [
        (404, True, False, False),
        (409, False, True, False),
        (401, False, False, True),
        (500, False, False, False),
    ],
)
def test_status_predicates(status, not_found, conflict, unauthorized):
    err = APIError("GET", "/api/v1/organization", status)
    assert is_not_found(err) is not_found
    assert is_conflict(err) is conflict
    assert is_unauthorized(err) is unauthorized


def test_predicates_see_through_wrapping():
    outer = _wrap(APIError("GET", "/api/v1/organization/x", 404))
    assert not isinstance(outer, APIError)
    assert is_not_found(outer)
    assert not is_conflict(outer)


def test_predicates_follow_implicit_context():
    try:
        try:
            raise APIError("POST", "/api/v1/organization", 409)
        except APIError:
            raise KeyError("while handling")  # noqa: B904
    except KeyError as err:
        assert is_conflict(err)


def test_predicates_reject_other_errors():
    assert not is_not_found(None)
    assert not is_not_found(ValueError("404"))
    assert not is_not_found(ValidationError("id"))
    assert not is_unauthorized(DecodeError("bad payload"))
