# weaviate_community/query.py
"""GraphQL query documents and the builders that assemble them.

Three builders cover the ``Get``, ``Aggregate`` and ``Explore`` operations;
``RawQuery`` wraps a hand-written document for everything the builders do not
model. Clause values are passed through as GraphQL text, e.g.::

    query = (
        GetBuilder("JeopardyQuestion", ["question", "answer"])
        .with_near_text('{concepts: ["animals"]}')
        .with_limit(3)
        .with_additional(["distance"])
        .build()
    )

Builders never talk to the network; hand the built query to
``WeaviateClient.query``.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .exceptions import QueryBuildError

log = logging.getLogger(__name__)


# ------------ documents ------------
class GraphQLQuery(BaseModel):
    """An immutable GraphQL document. ``model_dump()`` is the request body."""
    model_config = ConfigDict(frozen=True)

    query: str

    def __init__(self, query: str, **data: Any):
        super().__init__(query=query, **data)

    def __str__(self) -> str:
        return self.query


class RawQuery(GraphQLQuery):
    """A caller-written document, sent exactly as given."""


class GetQuery(GraphQLQuery):
    @classmethod
    def builder(cls, class_name: str, properties: Iterable[str] = ()) -> GetBuilder:
        return GetBuilder(class_name, properties)


class AggregateQuery(GraphQLQuery):
    @classmethod
    def builder(cls, class_name: str) -> AggregateBuilder:
        return AggregateBuilder(class_name)


class ExploreQuery(GraphQLQuery):
    @classmethod
    def builder(cls) -> ExploreBuilder:
        return ExploreBuilder()


# ------------ near selectors ------------
class NearKind(str, Enum):
    TEXT = "nearText"
    VECTOR = "nearVector"
    OBJECT = "nearObject"
    IMAGE = "nearImage"
    AUDIO = "nearAudio"
    VIDEO = "nearVideo"
    THERMAL = "nearThermal"
    IMU = "nearIMU"
    DEPTH = "nearDepth"


@dataclass(frozen=True)
class NearSelector:
    """The similarity-search anchor of a query. A query holds at most one."""
    kind: NearKind
    value: str

    def render(self) -> str:
        return f"{self.kind.value}: {self.value}"


def _replace_near(current: NearSelector | None, new: NearSelector, target: str) -> NearSelector:
    if current is not None and current.kind is not new.kind:
        log.warning(
            "%s query already had %s set; replacing it with %s (only one near filter is allowed)",
            target, current.kind.value, new.kind.value,
        )
    return new


def _require_class_name(class_name: str) -> str:
    if not isinstance(class_name, str) or not class_name.strip():
        raise QueryBuildError("class_name must be a non-empty string")
    return class_name


def _as_list(values: Iterable[str]) -> list[str]:
    # a bare string is one field, not a sequence of characters
    if isinstance(values, str):
        return [values]
    return [str(v) for v in values]


def _quote(value: str) -> str:
    return json.dumps(value)


def _present(value: Any) -> bool:
    # blank fragments would render as ``where: `` and break the document
    if isinstance(value, NearSelector):
        value = value.value
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


class _NearSlot:
    """The nine ``with_near_*`` setters, all writing the one ``_near`` slot."""
    _operation = ""
    _near: NearSelector | None

    def with_near(self, selector: NearSelector) -> Self:
        """Set the near filter from a ``NearSelector``, replacing any other modality."""
        self._near = _replace_near(self._near, selector, self._operation)
        return self

    def with_near_text(self, near_text: str) -> Self:
        """Set ``nearText``; needs a text2vec module on the server."""
        return self.with_near(NearSelector(NearKind.TEXT, near_text))

    def with_near_vector(self, near_vector: str) -> Self:
        return self.with_near(NearSelector(NearKind.VECTOR, near_vector))

    def with_near_object(self, near_object: str) -> Self:
        return self.with_near(NearSelector(NearKind.OBJECT, near_object))

    def with_near_image(self, near_image: str) -> Self:
        """Set ``nearImage``; the image is passed base64 encoded inside the fragment."""
        return self.with_near(NearSelector(NearKind.IMAGE, near_image))

    def with_near_audio(self, near_audio: str) -> Self:
        return self.with_near(NearSelector(NearKind.AUDIO, near_audio))

    def with_near_video(self, near_video: str) -> Self:
        return self.with_near(NearSelector(NearKind.VIDEO, near_video))

    def with_near_thermal(self, near_thermal: str) -> Self:
        return self.with_near(NearSelector(NearKind.THERMAL, near_thermal))

    def with_near_imu(self, near_imu: str) -> Self:
        return self.with_near(NearSelector(NearKind.IMU, near_imu))

    def with_near_depth(self, near_depth: str) -> Self:
        return self.with_near(NearSelector(NearKind.DEPTH, near_depth))


# ------------ Get ------------
class GetBuilder(_NearSlot):
    """Builder for a ``Get`` query over one class.

    ``properties`` are the regular fields to return; cross references go in
    here too, e.g. ``"hasCategory { ... on JeopardyCategory { title } }"``.
    Meta fields such as ``id`` or ``vector`` go through ``with_additional``.

    Clauses are not checked against each other: ``after`` next to ``where``
    or a ``sort`` next to ``hybrid`` are sent as is and rejected, if at all,
    by the server.
    """
    _operation = "Get"

    def __init__(self, class_name: str, properties: Iterable[str] = ()):
        self.class_name = _require_class_name(class_name)
        self.properties = _as_list(properties)
        self.additional: list[str] | None = None
        self.where: str | None = None
        self.limit: int | None = None
        self.offset: int | None = None
        self._near: NearSelector | None = None
        self.bm25: str | None = None
        self.hybrid: str | None = None
        self.group_by: str | None = None
        self.after: str | None = None
        self.tenant: str | None = None
        self.autocut: int | None = None
        self.sort: str | None = None
        self.ask: str | None = None

    @property
    def near(self) -> NearSelector | None:
        return self._near

    def with_where(self, where_clause: str) -> Self:
        """Set the ``where`` filter, e.g. ``{path: ["points"], operator: GreaterThan, valueInt: 200}``."""
        self.where = where_clause
        return self

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_offset(self, offset: int) -> Self:
        self.offset = offset
        return self

    def with_bm25(self, bm25: str) -> Self:
        """Set a keyword search, e.g. ``{query: "food", properties: ["question"]}``."""
        self.bm25 = bm25
        return self

    def with_hybrid(self, hybrid: str) -> Self:
        """Set a weighted keyword + vector search, e.g. ``{query: "food", alpha: 0.5}``."""
        self.hybrid = hybrid
        return self

    def with_group_by(self, group_by: str) -> Self:
        """Group results: ``{path: ["prop"], groups: 2, objectsPerGroup: 3}``.

        Only valid next to a near filter on the server side.
        """
        self.group_by = group_by
        return self

    def with_after(self, after: UUID | str) -> Self:
        """Cursor over the whole class; the server refuses it next to where, near, bm25 or hybrid."""
        self.after = str(after)
        return self

    def with_tenant(self, tenant: str) -> Self:
        """Name the tenant to read from; required on multi-tenant classes.

        Pass the bare name: it is rendered as a JSON string, so ``'"t1"'``
        would arrive quoted twice. The same holds for ``with_after``.
        """
        self.tenant = tenant
        return self

    def with_autocut(self, autocut: int) -> Self:
        """Cut results after ``autocut`` jumps in distance (near, bm25 and hybrid searches)."""
        self.autocut = autocut
        return self

    def with_sort(self, sort: str) -> Self:
        """Sort on primitive properties, e.g. ``[{path: ["points"], order: desc}]``."""
        self.sort = sort
        return self

    def with_ask(self, ask: str) -> Self:
        """Question answering with the qna module, e.g. ``{question: "Who?"}``."""
        self.ask = ask
        return self

    def with_additional(self, additional: Iterable[str]) -> Self:
        """Meta fields to return in the ``_additional`` block (``id``, ``vector``, ``distance``...)."""
        self.additional = _as_list(additional)
        return self

    def clauses(self) -> list[tuple[str, str]]:
        """The present clauses as ``(name, rendered value)`` in document order."""
        out: list[tuple[str, str]] = []
        if _present(self.where):
            out.append(("where", self.where))
        if _present(self.limit):
            out.append(("limit", str(self.limit)))
        if _present(self.offset):
            out.append(("offset", str(self.offset)))
        if _present(self._near):
            out.append((self._near.kind.value, self._near.value))
        if _present(self.bm25):
            out.append(("bm25", self.bm25))
        if _present(self.hybrid):
            out.append(("hybrid", self.hybrid))
        if _present(self.group_by):
            out.append(("groupBy", self.group_by))
        if _present(self.after):
            out.append(("after", _quote(self.after)))
        if _present(self.tenant):
            out.append(("tenant", _quote(self.tenant)))
        if _present(self.autocut):
            out.append(("autocut", str(self.autocut)))
        if _present(self.sort):
            out.append(("sort", self.sort))
        if _present(self.ask):
            out.append(("ask", self.ask))
        return out

    def build(self) -> GetQuery:
        """Render the document. Reads state only, so repeated calls agree.

        ``GetBuilder("JeopardyQuestion", ["question"]).with_limit(1).build()``
        gives::

            {
              Get {
                JeopardyQuestion
                (
                  limit: 1
                )
                {
                  question
                }
              }
            }
        """
        lines = ["{", "  Get {", f"    {self.class_name}"]

        clauses = self.clauses()
        if clauses:
            lines.append("    (")
            lines.extend(f"      {name}: {value}" for name, value in clauses)
            lines.append("    )")

        lines.append("    {")
        if self.properties:
            lines.append(f"      {' '.join(self.properties)}")
        if self.additional:
            lines.append("      _additional {")
            lines.append(f"        {' '.join(self.additional)}")
            lines.append("      }")
        lines.extend(["    }", "  }", "}"])
        return GetQuery("\n".join(lines))


# ------------ Aggregate ------------
class AggregateBuilder(_NearSlot):
    """Builder for an ``Aggregate`` query over one class.

    ``objectLimit`` only makes sense together with a near filter, and
    ``groupBy`` usually wants ``groupedBy {value path}`` among the fields.
    """
    _operation = "Aggregate"

    def __init__(self, class_name: str):
        self.class_name = _require_class_name(class_name)
        self.fields: list[str] | None = None
        self.meta_count = False
        self.where: str | None = None
        self.group_by: str | None = None
        self._near: NearSelector | None = None
        self.object_limit: int | None = None
        self.tenant: str | None = None
        self.limit: int | None = None

    @property
    def near(self) -> NearSelector | None:
        return self._near

    def with_where(self, where_clause: str) -> Self:
        self.where = where_clause
        return self

    def with_group_by(self, group_by: str) -> Self:
        """Group on a property path, e.g. ``["inPublication"]``."""
        self.group_by = group_by
        return self

    # name kept for callers used to the filter naming
    with_group_by_filter = with_group_by

    def with_object_limit(self, object_limit: int) -> Self:
        self.object_limit = object_limit
        return self

    def with_tenant(self, tenant: str) -> Self:
        self.tenant = tenant
        return self

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_meta_count(self) -> Self:
        """Add ``meta{count}`` to the body."""
        self.meta_count = True
        return self

    def with_fields(self, fields: Iterable[str]) -> Self:
        """Aggregations to return, e.g. ``["wordCount { mean maximum }"]``."""
        self.fields = _as_list(fields)
        return self

    def clauses(self) -> list[tuple[str, str]]:
        out: list[tuple[str, str]] = []
        if _present(self.where):
            out.append(("where", self.where))
        if _present(self.group_by):
            out.append(("groupBy", self.group_by))
        if _present(self._near):
            out.append((self._near.kind.value, self._near.value))
        if _present(self.object_limit):
            out.append(("objectLimit", str(self.object_limit)))
        if _present(self.tenant):
            out.append(("tenant", _quote(self.tenant)))
        if _present(self.limit):
            out.append(("limit", str(self.limit)))
        return out

    def build(self) -> AggregateQuery:
        lines = ["{", "  Aggregate {", f"    {self.class_name}"]

        clauses = self.clauses()
        if clauses:
            lines.append("    (")
            lines.extend(f"      {name}: {value}" for name, value in clauses)
            lines.append("    )")

        lines.append("    {")
        if self.meta_count:
            lines.append("      meta{count}")
        if self.fields:
            lines.append(f"      {' '.join(self.fields)}")
        lines.extend(["    }", "  }", "}"])
        return AggregateQuery("\n".join(lines))


# ------------ Explore ------------
class ExploreBuilder:
    """Builder for a class-agnostic ``Explore`` query.

    Explore searches by text or vector only, so it exposes just those two near
    setters. One of them must be set before ``build()``.
    """
    _operation = "Explore"

    def __init__(self):
        self.limit: int | None = None
        self.fields: list[str] | None = None
        self._near: NearSelector | None = None

    @property
    def near(self) -> NearSelector | None:
        return self._near

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_fields(self, fields: Iterable[str]) -> Self:
        """Result fields, e.g. ``["beacon", "certainty", "className"]``."""
        self.fields = _as_list(fields)
        return self

    def with_near_text(self, near_text: str) -> Self:
        self._near = _replace_near(self._near, NearSelector(NearKind.TEXT, near_text), self._operation)
        return self

    def with_near_vector(self, near_vector: str) -> Self:
        self._near = _replace_near(self._near, NearSelector(NearKind.VECTOR, near_vector), self._operation)
        return self

    def build(self) -> ExploreQuery:
        if not _present(self._near):
            raise QueryBuildError("Explore needs a nearText or nearVector filter")

        lines = ["{", "  Explore", "  ("]
        if self.limit is not None:
            lines.append(f"    limit: {self.limit}")
        lines.append(f"    {self._near.render()}")
        lines.extend(["  )", "  {"])
        if self.fields:
            lines.append(f"    {' '.join(self.fields)}")
        lines.extend(["  }", "}"])
        return ExploreQuery("\n".join(lines))
