"""Atomic operations batch endpoint: ``POST /api/v1/operations``.

A batch is an ordered list of add/update/remove steps sent in one request.
The server answers with ``atomic:results`` holding one entry per step, in
submission order; results are matched to operations by position only.
Whether the server applies a batch transactionally is up to the server.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from terrakube.errors import DecodeError
from terrakube.protocol import PLAIN_JSON
from terrakube.schemas.atomic import AtomicRequest, AtomicResponse, AtomicResult, Operation

if TYPE_CHECKING:
    from terrakube.client import Client

logger = logging.getLogger(__name__)


class OperationsService:
    """Submit atomic operation batches."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def submit(self, operations: AtomicRequest | Sequence[Operation]) -> list[AtomicResult]:
        """Send ``operations`` as a single batch.

        Args:
            operations: An ``AtomicRequest`` or a sequence of ``Operation``.
                An empty batch is valid and yields no results.

        Returns:
            One ``AtomicResult`` per submitted operation, in submission order.

        Raises:
            APIError: On a non-2xx response; no per-operation outcome is
                available in that case.
            DecodeError: If the response is not an ``atomic:results``
                document or its length differs from the batch.
        """
        request = operations if isinstance(operations, AtomicRequest) else AtomicRequest(operations=list(operations))
        path = self.client.api_path("operations")
        logger.debug("Submitting %d atomic operations", len(request.operations))

        response: AtomicResponse | None = self.client.request(
            "POST",
            path,
            AtomicResponse,
            body=request,
            protocol=PLAIN_JSON,
        )
        results = response.results if response is not None else []

        if len(results) != len(request.operations):
            raise DecodeError(
                f"POST {path}: got {len(results)} atomic results for {len(request.operations)} operations"
            )
        return results
