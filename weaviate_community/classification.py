# weaviate_community/classification.py
from __future__ import annotations
from typing import TYPE_CHECKING

from . import models as M
from .exceptions import ClassificationError

if TYPE_CHECKING:
    from .client import WeaviateClient


class Classification:
    def __init__(self, core: WeaviateClient):
        self.core = core

    def schedule(self, request: M.ClassificationRequest) -> M.ClassificationResponse:
        """Start a classification; it runs in the background, poll ``get`` for its status."""
        r = self.core._request(
            "POST",
            "/v1/classifications",
            json=request.to_wire(),
            error=ClassificationError,
            action="schedule classification",
        )
        return M.ClassificationResponse.model_validate(self.core._json(r, "schedule classification"))

    def get(self, classification_id: str) -> M.ClassificationResponse:
        r = self.core._request(
            "GET",
            f"/v1/classifications/{classification_id}",
            error=ClassificationError,
            action="get classification",
        )
        return M.ClassificationResponse.model_validate(self.core._json(r, "get classification"))
