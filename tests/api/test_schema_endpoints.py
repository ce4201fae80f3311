import httpx
import pytest

from weaviate_community import ClientConfig, WeaviateClient, models as M
from weaviate_community.exceptions import SchemaError


def test_create_and_get_class(client, article_class):
    assert article_class.class_name == "Article"
    assert article_class.vector_index_type == "hnsw"

    schema = client.schema.get()
    assert [c.class_name for c in schema.classes] == ["Article"]

    cls = client.schema.get_class("Article")
    assert [p.name for p in cls.properties] == ["title", "wordCount"]
    assert cls.properties[1].data_type == ["int"]


def test_create_class_sends_wire_names(client, app):
    client.schema.create_class(M.Class(
        class_name="Doc",
        multi_tenancy_config=M.MultiTenancyConfig(enabled=True),
    ))
    stored = app.state.store.classes["Doc"]
    assert stored["class"] == "Doc"
    assert stored["multiTenancyConfig"] == {"enabled": True}


def test_duplicate_class_raises_schema_error(client, article_class):
    with pytest.raises(SchemaError) as ei:
        client.schema.create_class(M.Class(class_name="Article"))
    assert ei.value.status_code == 422
    assert "already exists" in str(ei.value)


def test_missing_class_is_404(client):
    with pytest.raises(SchemaError) as ei:
        client.schema.get_class("Nope")
    assert ei.value.status_code == 404
    assert ei.value.action == "get class"


def test_update_add_property_and_delete(client, article_class):
    updated = client.schema.update(M.Class(class_name="Article", description="news"))
    assert updated.description == "news"

    prop = client.schema.add_property("Article", M.Property(name="body", data_type=["text"]))
    assert prop.name == "body"
    assert [p.name for p in client.schema.get_class("Article").properties] == ["body"]

    assert client.schema.delete("Article") is True
    assert client.schema.get().classes == []


def test_shards(client, article_class):
    shards = client.schema.get_shards("Article").root
    assert len(shards) == 1
    assert shards[0].status is M.ShardStatus.READY

    shard = client.schema.update_class_shard("Article", shards[0].name, M.ShardStatus.READONLY)
    assert shard.status is M.ShardStatus.READONLY
    assert client.schema.get_shards("Article").root[0].status is M.ShardStatus.READONLY


def test_tenants_lifecycle(client):
    client.schema.create_class(M.Class(
        class_name="Doc",
        multi_tenancy_config=M.MultiTenancyConfig(enabled=True),
    ))
    added = client.schema.add_tenants("Doc", [M.Tenant(name="a"), M.Tenant(name="b")])
    assert [t.name for t in added.root] == ["a", "b"]

    client.schema.update_tenants("Doc", [M.Tenant(name="b", activity_status=M.ActivityStatus.COLD)])
    tenants = {t.name: t.activity_status for t in client.schema.list_tenants("Doc").root}
    assert tenants == {"a": M.ActivityStatus.HOT, "b": M.ActivityStatus.COLD}

    assert client.schema.remove_tenants("Doc", ["a"]) is True
    assert [t.name for t in client.schema.list_tenants("Doc").root] == ["b"]


def test_tenants_need_multi_tenancy(client, article_class):
    with pytest.raises(SchemaError) as ei:
        client.schema.add_tenants("Article", [M.Tenant(name="a")])
    assert ei.value.status_code == 422


def test_update_class_shard_returns_server_status():
    def handler(request):
        assert request.method == "PUT"
        assert request.url.path == "/v1/schema/Article/shards/s1"
        return httpx.Response(200, json={"status": "READY"})

    http = httpx.Client(base_url="http://weaviate.test", transport=httpx.MockTransport(handler))
    cli = WeaviateClient(ClientConfig(base_url="http://weaviate.test"), http_client=http)
    shard = cli.schema.update_class_shard("Article", "s1", M.ShardStatus.READONLY)
    assert shard == M.Shard(name="s1", status=M.ShardStatus.READY)
