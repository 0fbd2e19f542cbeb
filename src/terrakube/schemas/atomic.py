"""Request/response models for the JSON:API atomic operations extension.

The ``/operations`` endpoint takes an ordered list of add/update/remove
steps and answers with one result per step, in the same order. Both
documents travel as plain ``application/json``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OperationAction(str, Enum):
    """Action performed by a single atomic operation."""

    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"


class OperationRef(BaseModel):
    """Target of an operation: a resource type plus optional id or relationship."""

    type: str
    id: str | None = None
    lid: str | None = None
    relationship: str | None = None


class Operation(BaseModel):
    """One step of an atomic batch.

    ``add`` and ``update`` carry a ``data`` payload; ``remove`` usually
    addresses its target through ``ref`` alone.
    """

    op: OperationAction
    ref: OperationRef | None = None
    href: str | None = None
    data: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


class AtomicRequest(BaseModel):
    """Request body for ``POST /api/v1/operations``."""

    model_config = ConfigDict(populate_by_name=True)

    operations: list[Operation] = Field(default_factory=list, alias="atomic:operations")


class AtomicResult(BaseModel):
    """Outcome of a single operation."""

    data: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


class AtomicResponse(BaseModel):
    """Response body for ``POST /api/v1/operations``."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[AtomicResult] = Field(default_factory=list, alias="atomic:results")
