"""Pydantic schemas for the JSON:API and atomic operations wire documents."""

from terrakube.schemas.atomic import (
    AtomicRequest,
    AtomicResponse,
    AtomicResult,
    Operation,
    OperationAction,
    OperationRef,
)
from terrakube.schemas.jsonapi import (
    JSONAPIError,
    JSONAPIErrorResponse,
    JSONAPIListResponse,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
    JSONAPISingleResponse,
)

__all__ = [
    "AtomicRequest",
    "AtomicResponse",
    "AtomicResult",
    "JSONAPIError",
    "JSONAPIErrorResponse",
    "JSONAPIListResponse",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "JSONAPISingleResponse",
    "Operation",
    "OperationAction",
    "OperationRef",
]
