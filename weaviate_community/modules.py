# weaviate_community/modules.py
from __future__ import annotations
from typing import TYPE_CHECKING
from urllib.parse import quote

from . import models as M
from .exceptions import ModuleError

if TYPE_CHECKING:
    from .client import WeaviateClient

CONTEXTIONARY = "/v1/modules/text2vec-contextionary"


class Modules:
    """Module-specific endpoints. Only text2vec-contextionary exposes any today."""

    def __init__(self, core: WeaviateClient):
        self.core = core

    def contextionary_get_concept(self, concept: str) -> M.ContextionaryConcept:
        """Look up a word or camelCased concept in the contextionary."""
        r = self.core._request(
            "GET",
            f"{CONTEXTIONARY}/concepts/{quote(concept, safe='')}",
            error=ModuleError,
            action="get contextionary concept",
        )
        return M.ContextionaryConcept.model_validate(self.core._json(r, "get contextionary concept"))

    def contextionary_extend(self, extension: M.ContextionaryExtension) -> M.ContextionaryExtension:
        """Teach the contextionary a new concept, or override an existing one."""
        r = self.core._request(
            "POST",
            f"{CONTEXTIONARY}/extensions",
            json=extension.to_wire(),
            error=ModuleError,
            action="extend contextionary",
        )
        return M.ContextionaryExtension.model_validate(self.core._json(r, "extend contextionary"))
