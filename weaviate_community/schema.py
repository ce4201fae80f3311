# weaviate_community/schema.py
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

from . import models as M
from .exceptions import SchemaError

if TYPE_CHECKING:
    from .client import WeaviateClient


class Schema:
    """Class, property, shard and tenant management under ``/v1/schema``."""

    def __init__(self, core: WeaviateClient):
        self.core = core

    def _call(self, method: str, url: str, action: str, json=None):
        return self.core._request(method, url, json=json, error=SchemaError, action=action)

    # ------------ classes ------------
    def get(self) -> M.Classes:
        r = self._call("GET", "/v1/schema", "get schema")
        return M.Classes(**self.core._json(r, "get schema"))

    def get_class(self, class_name: str) -> M.Class:
        r = self._call("GET", f"/v1/schema/{class_name}", "get class")
        return M.Class.model_validate(self.core._json(r, "get class"))

    def create_class(self, cls: M.Class) -> M.Class:
        """Create a class. Optional since auto-schema, but gives control over vectorizer and index."""
        r = self._call("POST", "/v1/schema", "create class", json=cls.to_wire())
        return M.Class.model_validate(self.core._json(r, "create class"))

    def update(self, cls: M.Class) -> M.Class:
        """Replace the mutable settings of a class; properties are changed via ``add_property``."""
        r = self._call("PUT", f"/v1/schema/{cls.class_name}", "update class", json=cls.to_wire())
        return M.Class.model_validate(self.core._json(r, "update class"))

    def delete(self, class_name: str) -> bool:
        """Drop a class together with all of its objects."""
        self._call("DELETE", f"/v1/schema/{class_name}", "delete class")
        return True

    def add_property(self, class_name: str, prop: M.Property) -> M.Property:
        r = self._call("POST", f"/v1/schema/{class_name}/properties", "add property", json=prop.to_wire())
        return M.Property.model_validate(self.core._json(r, "add property"))

    # ------------ shards ------------
    def get_shards(self, class_name: str) -> M.Shards:
        r = self._call("GET", f"/v1/schema/{class_name}/shards", "get shards")
        return M.Shards.model_validate(self.core._json(r, "get shards"))

    def update_class_shard(self, class_name: str, shard_name: str, status: M.ShardStatus) -> M.Shard:
        r = self._call(
            "PUT",
            f"/v1/schema/{class_name}/shards/{shard_name}",
            "update class shard",
            json={"status": M.ShardStatus(status).value},
        )
        # the server answers with the status only
        return M.Shard.model_validate({"name": shard_name, **self.core._json(r, "update class shard")})

    # ------------ tenants ------------
    def list_tenants(self, class_name: str) -> M.Tenants:
        r = self._call("GET", f"/v1/schema/{class_name}/tenants", "list tenants")
        return M.Tenants.model_validate(self.core._json(r, "list tenants"))

    def add_tenants(self, class_name: str, tenants: Iterable[M.Tenant]) -> M.Tenants:
        body = [t.to_wire() for t in tenants]
        r = self._call("POST", f"/v1/schema/{class_name}/tenants", "add tenants", json=body)
        return M.Tenants.model_validate(self.core._json(r, "add tenants"))

    def remove_tenants(self, class_name: str, tenant_names: Iterable[str]) -> bool:
        self._call("DELETE", f"/v1/schema/{class_name}/tenants", "remove tenants", json=list(tenant_names))
        return True

    def update_tenants(self, class_name: str, tenants: Iterable[M.Tenant]) -> M.Tenants:
        """Change tenant activity status (server 1.21+); name and status are both required."""
        body = [t.to_wire() for t in tenants]
        r = self._call("PUT", f"/v1/schema/{class_name}/tenants", "update tenants", json=body)
        return M.Tenants.model_validate(self.core._json(r, "update tenants"))
