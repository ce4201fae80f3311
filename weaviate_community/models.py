# weaviate_community/models.py
from __future__ import annotations
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python; unknown keys are dropped."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def beacon(class_name: str, uuid: UUID | str) -> str:
    return f"weaviate://localhost/{class_name}/{uuid}"


# -------- Schema --------
class ShardStatus(str, Enum):
    READONLY = "READONLY"
    READY = "READY"


class ActivityStatus(str, Enum):
    HOT = "HOT"
    COLD = "COLD"


class Property(WireModel):
    name: str
    data_type: list[str]
    description: str | None = None
    tokenization: str | None = None
    module_config: dict[str, dict[str, Any]] | None = None
    index_filterable: bool | None = None
    index_searchable: bool | None = None


class ShardingConfig(WireModel):
    model_config = ConfigDict(extra="allow")

    virtual_per_physical: int | None = None
    desired_count: int | None = None
    actual_count: int | None = None
    desired_virtual_count: int | None = None
    actual_virtual_count: int | None = None
    key: str | None = None
    strategy: str | None = None
    function: str | None = None


class MultiTenancyConfig(WireModel):
    enabled: bool = False


class Class(WireModel):
    class_name: str = Field(alias="class")
    description: str | None = None
    properties: list[Property] | None = None
    vector_index_type: str | None = None
    vector_index_config: dict[str, Any] | None = None
    vectorizer: str | None = None
    module_config: dict[str, Any] | None = None
    inverted_index_config: dict[str, Any] | None = None
    sharding_config: ShardingConfig | None = None
    multi_tenancy_config: MultiTenancyConfig | None = None
    replication_config: dict[str, Any] | None = None


class Classes(WireModel):
    classes: list[Class] = Field(default_factory=list)


class Shard(WireModel):
    name: str
    status: ShardStatus


class Shards(RootModel[list[Shard]]):
    """Shards of one class, as returned by the shards endpoint."""


class Tenant(WireModel):
    name: str
    activity_status: ActivityStatus | None = ActivityStatus.HOT


class Tenants(RootModel[list[Tenant]]):
    """Tenants of one class."""


# -------- Objects --------
class ConsistencyLevel(str, Enum):
    ONE = "ONE"
    QUORUM = "QUORUM"
    ALL = "ALL"


class OrderBy(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Object(WireModel):
    class_name: str = Field(alias="class")
    properties: dict[str, Any] = Field(default_factory=dict)
    id: UUID | None = None
    vector: list[float] | None = None
    tenant: str | None = None
    creation_time_unix: int | None = None
    last_update_time_unix: int | None = None
    vector_weights: dict[str, Any] | None = None
    additional: dict[str, Any] | None = None


class MultiObjects(WireModel):
    objects: list[Object] = Field(default_factory=list)
    deprecations: list[Any] | None = None
    total_results: int | None = None


class ObjectListParameters(WireModel):
    class_name: str | None = None
    limit: int | None = None
    offset: int | None = None
    after: str | None = None
    include: str | None = None
    sort: list[str] | None = None
    order: list[OrderBy] | None = None
    tenant: str | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.class_name is not None:
            params["class"] = self.class_name
        if self.limit is not None:
            params["limit"] = str(self.limit)
        if self.offset is not None:
            params["offset"] = str(self.offset)
        if self.after is not None:
            params["after"] = self.after
        if self.include is not None:
            params["include"] = self.include
        if self.sort:
            params["sort"] = ",".join(self.sort)
        if self.order:
            params["order"] = ",".join(o.value for o in self.order)
        if self.tenant is not None:
            params["tenant"] = self.tenant
        return params


class Reference(WireModel):
    from_class_name: str
    from_uuid: UUID
    from_property_name: str
    to_class_name: str
    to_uuid: UUID
    consistency_level: ConsistencyLevel | None = None
    tenant: str | None = None

    def to_beacon(self) -> dict[str, str]:
        return {"beacon": beacon(self.to_class_name, self.to_uuid)}


# -------- Batch --------
class GeneralStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    DRYRUN = "DRYRUN"


class Verbosity(str, Enum):
    MINIMAL = "minimal"
    VERBOSE = "verbose"


class ErrorMessage(WireModel):
    message: str


class BatchErrors(WireModel):
    error: list[ErrorMessage] = Field(default_factory=list)


class BatchResult(WireModel):
    status: GeneralStatus | None = None
    errors: BatchErrors | None = None


class BatchObjectResult(Object):
    result: BatchResult = Field(default_factory=BatchResult)


class MatchConfig(WireModel):
    class_name: str = Field(alias="class")
    where: dict[str, Any]


class BatchDeleteRequest(WireModel):
    match: MatchConfig
    output: Verbosity | None = None
    dry_run: bool | None = None


class DeleteObject(WireModel):
    id: UUID
    status: GeneralStatus
    errors: BatchErrors | None = None


class BatchDeleteResult(WireModel):
    matches: int = 0
    limit: int = 0
    successful: int = 0
    failed: int = 0
    objects: list[DeleteObject] | None = None


class BatchDeleteResponse(WireModel):
    match: MatchConfig
    output: Verbosity | None = None
    dry_run: bool | None = None
    results: BatchDeleteResult


class BatchReference(WireModel):
    from_class_name: str
    from_uuid: UUID
    from_property_name: str
    to_class_name: str
    to_uuid: UUID
    tenant: str | None = None

    def to_wire(self) -> dict[str, Any]:
        body = {
            "from": f"{beacon(self.from_class_name, self.from_uuid)}/{self.from_property_name}",
            "to": beacon(self.to_class_name, self.to_uuid),
        }
        if self.tenant is not None:
            body["tenant"] = self.tenant
        return body


class BatchReferenceResult(WireModel):
    result: BatchResult = Field(default_factory=BatchResult)


# -------- Backups --------
class BackupBackend(str, Enum):
    FILESYSTEM = "filesystem"
    S3 = "s3"
    GCS = "gcs"
    AZURE = "azure"


class BackupStatus(str, Enum):
    STARTED = "STARTED"
    TRANSFERRING = "TRANSFERRING"
    TRANSFERRED = "TRANSFERRED"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"

    @property
    def finished(self) -> bool:
        return self in (BackupStatus.SUCCESS, BackupStatus.FAILED)


class BackupCreateRequest(WireModel):
    id: str
    include: list[str] | None = None
    exclude: list[str] | None = None


class BackupRestoreRequest(WireModel):
    include: list[str] | None = None
    exclude: list[str] | None = None


class BackupResponse(WireModel):
    id: str
    backend: BackupBackend | None = None
    classes: list[str] = Field(default_factory=list)
    path: str | None = None
    status: BackupStatus
    error: str | None = None


class BackupStatusResponse(WireModel):
    id: str
    backend: str | None = None
    path: str | None = None
    status: BackupStatus
    error: str | None = None


# -------- Classification --------
class ClassificationType(str, Enum):
    KNN = "knn"
    ZEROSHOT = "zeroshot"


class ClassificationRequest(WireModel):
    classification_type: ClassificationType = Field(default=ClassificationType.KNN, alias="type")
    class_name: str = Field(alias="class")
    classify_properties: list[str]
    based_on_properties: list[str] | None = None
    filters: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None


class ClassificationMeta(WireModel):
    started: str | None = None
    completed: str | None = None
    count: int = 0
    count_succeeded: int = 0
    count_failed: int = 0


class ClassificationResponse(WireModel):
    id: str
    class_name: str = Field(alias="class")
    classify_properties: list[str] = Field(default_factory=list)
    based_on_properties: list[str] | None = None
    status: str
    meta: ClassificationMeta | None = None
    classification_type: str | None = Field(default=None, alias="type")
    settings: dict[str, Any] | None = None
    filters: dict[str, Any] | None = None


# -------- Meta / Nodes / OIDC --------
class Metadata(WireModel):
    hostname: str
    version: str
    modules: dict[str, Any] = Field(default_factory=dict)


class NodeStatus(str, Enum):
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"
    UNAVAILABLE = "UNAVAILABLE"
    INDEXING = "INDEXING"


class BatchStats(WireModel):
    rate_per_second: int | None = None
    queue_length: int | None = None


class NodeShard(WireModel):
    class_name: str | None = Field(default=None, alias="class")
    name: str | None = None
    object_count: int | None = None
    vector_indexing_status: str | None = None
    vector_queue_length: int | None = None


class NodeStats(WireModel):
    object_count: int | None = None
    shard_count: int | None = None


class Node(WireModel):
    name: str | None = None
    status: NodeStatus | None = None
    version: str | None = None
    git_hash: str | None = None
    batch_stats: BatchStats | None = None
    stats: NodeStats | None = None
    shards: list[NodeShard] | None = None


class MultiNodes(WireModel):
    nodes: list[Node] = Field(default_factory=list)


class OidcResponse(WireModel):
    href: str
    client_id: str = Field(alias="clientId")
    scopes: list[str] | None = None


# -------- Modules --------
class IndividualWord(WireModel):
    word: str
    distance: float | None = None


class ConcatenatedWord(WireModel):
    concatenated_word: str | None = None
    single_words: list[str] | None = None
    concatenated_vector: list[float] | None = None
    concatenated_nearest_neighbors: list[IndividualWord] | None = None


class ContextionaryConceptInfo(WireModel):
    nearest_neighbors: list[IndividualWord] = Field(default_factory=list)
    vector: list[float] = Field(default_factory=list)


class IndividualWords(WireModel):
    word: str
    present: bool | None = None
    info: ContextionaryConceptInfo | None = None
    concatenated_word: ConcatenatedWord | None = None


class ContextionaryConcept(WireModel):
    individual_words: list[IndividualWords] = Field(default_factory=list)


class ContextionaryExtension(WireModel):
    concept: str
    definition: str
    weight: float = 1.0
