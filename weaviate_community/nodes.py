# weaviate_community/nodes.py
from __future__ import annotations
from typing import TYPE_CHECKING

from . import models as M
from .exceptions import NodesError

if TYPE_CHECKING:
    from .client import WeaviateClient


class Nodes:
    def __init__(self, core: WeaviateClient):
        self.core = core

    def get_nodes_status(self) -> M.MultiNodes:
        r = self.core._request("GET", "/v1/nodes", error=NodesError, action="get nodes status")
        return M.MultiNodes.model_validate(self.core._json(r, "get nodes status"))
