# weaviate_community/meta.py
from __future__ import annotations
from typing import TYPE_CHECKING

from . import models as M
from .exceptions import MetaError

if TYPE_CHECKING:
    from .client import WeaviateClient


class Meta:
    def __init__(self, core: WeaviateClient):
        self.core = core

    def get_meta(self) -> M.Metadata:
        """Hostname, version and enabled modules of the server."""
        r = self.core._request("GET", "/v1/meta", error=MetaError, action="get meta")
        return M.Metadata.model_validate(self.core._json(r, "get meta"))
