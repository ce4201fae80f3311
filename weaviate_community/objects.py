# weaviate_community/objects.py
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Sequence
from uuid import UUID

from . import models as M
from .exceptions import ObjectsError, QueryError

if TYPE_CHECKING:
    from .client import WeaviateClient


def _params(consistency_level: M.ConsistencyLevel | None = None, tenant: str | None = None, **extra: str | None) -> dict[str, str]:
    params = {k: v for k, v in extra.items() if v is not None}
    if consistency_level is not None:
        params["consistency_level"] = M.ConsistencyLevel(consistency_level).value
    if tenant is not None:
        # multi-tenancy must be enabled on the class
        params["tenant"] = tenant
    return params


def validate_list_parameters(parameters: M.ObjectListParameters) -> None:
    """Reject cursor combinations the server refuses, before any request is made."""
    if parameters.after is None:
        return
    if parameters.class_name is None:
        raise QueryError("'class_name' must be set when 'after' is set")
    if parameters.offset is not None:
        raise QueryError("'offset' must be None when 'after' is set")
    if parameters.sort is not None:
        raise QueryError("'sort' must be None when 'after' is set")


class Objects:
    """Single-object CRUD and cross references under ``/v1/objects``.

    For many objects at once prefer ``client.batch``.
    """

    def __init__(self, core: WeaviateClient):
        self.core = core

    def _call(self, method: str, url: str, action: str, **kwargs: Any):
        return self.core._request(method, url, error=ObjectsError, action=action, **kwargs)

    def list(self, parameters: M.ObjectListParameters | None = None) -> M.MultiObjects:
        parameters = parameters or M.ObjectListParameters()
        validate_list_parameters(parameters)
        r = self._call("GET", "/v1/objects", "list objects", params=parameters.to_params())
        return M.MultiObjects(**self.core._json(r, "list objects"))

    def create(self, obj: M.Object, consistency_level: M.ConsistencyLevel | None = None) -> M.Object:
        """Create one object; the server validates properties against the schema."""
        r = self._call("POST", "/v1/objects", "create object", json=obj.to_wire(), params=_params(consistency_level))
        return M.Object.model_validate(self.core._json(r, "create object"))

    def get(
        self,
        class_name: str,
        id: UUID | str,
        include: str | None = None,
        consistency_level: M.ConsistencyLevel | None = None,
        tenant: str | None = None,
    ) -> M.Object:
        """Fetch one object; ``include`` may be ``"vector"`` or ``"classification"``."""
        r = self._call(
            "GET",
            f"/v1/objects/{class_name}/{id}",
            "get object",
            params=_params(consistency_level, tenant, include=include),
        )
        return M.Object.model_validate(self.core._json(r, "get object"))

    def exists(
        self,
        class_name: str,
        id: UUID | str,
        consistency_level: M.ConsistencyLevel | None = None,
        tenant: str | None = None,
    ) -> bool:
        r = self._call(
            "HEAD",
            f"/v1/objects/{class_name}/{id}",
            "object exists",
            params=_params(consistency_level, tenant),
            ok=(204, 404),
        )
        return r.status_code == 204

    def update(
        self,
        class_name: str,
        id: UUID | str,
        properties: dict[str, Any],
        consistency_level: M.ConsistencyLevel | None = None,
        tenant: str | None = None,
    ) -> bool:
        """Merge ``properties`` into the stored object (PATCH)."""
        body: dict[str, Any] = {"class": class_name, "id": str(id), "properties": properties}
        if tenant is not None:
            body["tenant"] = tenant
        self._call(
            "PATCH",
            f"/v1/objects/{class_name}/{id}",
            "update object",
            json=body,
            params=_params(consistency_level, tenant),
            ok=(200, 204),
        )
        return True

    def replace(
        self,
        class_name: str,
        id: UUID | str,
        properties: dict[str, Any],
        consistency_level: M.ConsistencyLevel | None = None,
        tenant: str | None = None,
    ) -> M.Object:
        """Overwrite the stored object with ``properties`` (PUT)."""
        body: dict[str, Any] = {"class": class_name, "id": str(id), "properties": properties}
        if tenant is not None:
            body["tenant"] = tenant
        r = self._call(
            "PUT",
            f"/v1/objects/{class_name}/{id}",
            "replace object",
            json=body,
            params=_params(consistency_level, tenant),
        )
        return M.Object.model_validate(self.core._json(r, "replace object"))

    def delete(
        self,
        class_name: str,
        id: UUID | str,
        consistency_level: M.ConsistencyLevel | None = None,
        tenant: str | None = None,
    ) -> bool:
        self._call(
            "DELETE",
            f"/v1/objects/{class_name}/{id}",
            "delete object",
            params=_params(consistency_level, tenant),
            ok=(204,),
        )
        return True

    def validate(self, class_name: str, properties: dict[str, Any], id: UUID | str) -> bool:
        """Check an object against the schema without storing it."""
        body = {"class": class_name, "id": str(id), "properties": properties}
        self._call("POST", "/v1/objects/validate", "validate object", json=body, ok=(200,))
        return True

    # ------------ references ------------
    def _reference_url(self, class_name: str, id: UUID | str, property_name: str) -> str:
        return f"/v1/objects/{class_name}/{id}/references/{property_name}"

    def reference_add(self, reference: M.Reference) -> bool:
        self._call(
            "POST",
            self._reference_url(reference.from_class_name, reference.from_uuid, reference.from_property_name),
            "add object reference",
            json=reference.to_beacon(),
            params=_params(reference.consistency_level, reference.tenant),
        )
        return True

    def reference_update(
        self,
        from_class_name: str,
        from_uuid: UUID | str,
        from_property_name: str,
        to_class_names: Sequence[str],
        to_uuids: Sequence[UUID | str],
        consistency_level: M.ConsistencyLevel | None = None,
        tenant: str | None = None,
    ) -> bool:
        """Replace every reference of ``from_property_name`` with the given targets."""
        if len(to_class_names) != len(to_uuids):
            raise QueryError("to_class_names and to_uuids must have the same length")
        body = [{"beacon": M.beacon(c, u)} for c, u in zip(to_class_names, to_uuids)]
        self._call(
            "PUT",
            self._reference_url(from_class_name, from_uuid, from_property_name),
            "update object reference",
            json=body,
            params=_params(consistency_level, tenant),
        )
        return True

    def reference_delete(self, reference: M.Reference) -> bool:
        self._call(
            "DELETE",
            self._reference_url(reference.from_class_name, reference.from_uuid, reference.from_property_name),
            "delete object reference",
            json=reference.to_beacon(),
            params=_params(reference.consistency_level, reference.tenant),
            ok=(204,),
        )
        return True
