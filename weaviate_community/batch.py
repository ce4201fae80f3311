# weaviate_community/batch.py
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

from . import models as M
from .exceptions import BatchError
from .objects import _params

if TYPE_CHECKING:
    from .client import WeaviateClient


class Batch:
    def __init__(self, core: WeaviateClient):
        self.core = core

    def objects_batch_add(
        self,
        objects: Iterable[M.Object],
        consistency_level: M.ConsistencyLevel | None = None,
    ) -> list[M.BatchObjectResult]:
        """Create many objects in one request.

        The request succeeds as a whole even when single objects fail; check
        ``result.errors`` on each returned item.
        """
        body = {"objects": [o.to_wire() for o in objects]}
        r = self.core._request(
            "POST",
            "/v1/batch/objects",
            json=body,
            params=_params(consistency_level),
            error=BatchError,
            action="batch add objects",
        )
        return [M.BatchObjectResult.model_validate(x) for x in self.core._json(r, "batch add objects")]

    def objects_batch_delete(
        self,
        request: M.BatchDeleteRequest,
        consistency_level: M.ConsistencyLevel | None = None,
    ) -> M.BatchDeleteResponse:
        """Delete every object of a class matching a ``where`` filter (set ``dry_run`` to preview)."""
        r = self.core._request(
            "DELETE",
            "/v1/batch/objects",
            json=request.to_wire(),
            params=_params(consistency_level),
            error=BatchError,
            action="batch delete objects",
        )
        return M.BatchDeleteResponse.model_validate(self.core._json(r, "batch delete objects"))

    def references_batch_add(
        self,
        references: Iterable[M.BatchReference],
        consistency_level: M.ConsistencyLevel | None = None,
    ) -> list[M.BatchReferenceResult]:
        body = [ref.to_wire() for ref in references]
        r = self.core._request(
            "POST",
            "/v1/batch/references",
            json=body,
            params=_params(consistency_level),
            error=BatchError,
            action="batch add references",
        )
        return [M.BatchReferenceResult.model_validate(x) for x in self.core._json(r, "batch add references")]
