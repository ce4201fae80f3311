# weaviate_community/oidc.py
from __future__ import annotations
from typing import TYPE_CHECKING

from . import models as M
from .exceptions import NotConfiguredError

if TYPE_CHECKING:
    from .client import WeaviateClient


class Oidc:
    def __init__(self, core: WeaviateClient):
        self.core = core

    def get_open_id_configuration(self) -> M.OidcResponse:
        """Where to obtain tokens, if the server has OpenID Connect enabled.

        A server without OIDC answers 404, raised as ``NotConfiguredError``.
        """
        r = self.core._request(
            "GET",
            "/v1/.well-known/openid-configuration",
            error=NotConfiguredError,
            action="get OpenID configuration",
            ok=(200,),
        )
        return M.OidcResponse.model_validate(self.core._json(r, "get OpenID configuration"))
