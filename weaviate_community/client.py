# weaviate_community/client.py
from __future__ import annotations
import logging
from typing import Any, Iterable

import httpx

from .backups import Backups
from .batch import Batch
from .classification import Classification
from .config import ClientConfig
from .exceptions import ResponseDecodeError, TransportError, UnexpectedStatusError
from .graphql import GraphQL
from .meta import Meta
from .modules import Modules
from .nodes import Nodes
from .objects import Objects
from .oidc import Oidc
from .schema import Schema

log = logging.getLogger(__name__)


class WeaviateClient:
    """Entry point: one shared ``httpx.Client`` behind every endpoint group.

    Pass ``http_client`` to reuse an existing client (its ``base_url`` and
    headers are used as they are); otherwise one is created from ``config``
    and closed by ``close()``.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.Client | None = None):
        self.cfg = config
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                base_url=config.base_url,
                timeout=config.timeout_s,
                headers=config.request_headers(),
            )
        self._client = http_client

        self.schema = Schema(self)
        self.objects = Objects(self)
        self.batch = Batch(self)
        self.backups = Backups(self)
        self.classification = Classification(self)
        self.meta = Meta(self)
        self.nodes = Nodes(self)
        self.oidc = Oidc(self)
        self.modules = Modules(self)
        self.query = GraphQL(self)

    @classmethod
    def from_env(cls) -> WeaviateClient:
        return cls(ClientConfig.from_env())

    # ------------ lifecycle ------------
    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> WeaviateClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------ low-level helpers ------------
    def _send(
        self,
        method: str,
        url: str,
        *,
        json: Any | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        log.debug("%s %s params=%s", method, url, params or {})
        try:
            return self._client.request(method, url, json=json, params=params)
        except httpx.TransportError as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url}: {e}") from e

    def _request(
        self,
        method: str,
        url: str,
        *,
        json: Any | None = None,
        params: dict[str, str] | None = None,
        error: type[UnexpectedStatusError] = UnexpectedStatusError,
        action: str = "",
        ok: Iterable[int] | None = None,
    ) -> httpx.Response:
        """Send one request; raise ``error`` unless the status is accepted.

        ``ok`` narrows the accepted statuses; by default any 2xx is accepted.
        """
        resp = self._send(method, url, json=json, params=params)
        accepted = resp.status_code in ok if ok is not None else resp.is_success
        if not accepted:
            body = _maybe_json(resp)
            log.warning("%s %s -> HTTP %d (%s)", method, url, resp.status_code, action or "request")
            raise error(resp.status_code, action or f"{method} {url}", body)
        return resp

    def _json(self, resp: httpx.Response, action: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ResponseDecodeError(action, resp.text) from e

    # ------------ health ------------
    def is_live(self) -> bool:
        """True when ``/v1/.well-known/live`` answers 200."""
        return self._send("GET", "/v1/.well-known/live").status_code == 200

    def is_ready(self) -> bool:
        """True when ``/v1/.well-known/ready`` answers 200."""
        return self._send("GET", "/v1/.well-known/ready").status_code == 200


def _maybe_json(resp: httpx.Response) -> Any | None:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text
