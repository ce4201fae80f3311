import pytest

from weaviate_community import models as M
from weaviate_community.exceptions import ClassificationError, ModuleError, NotConfiguredError


def test_health(client, app):
    assert client.is_live() is True
    assert client.is_ready() is True
    app.state.store.graphql_status = 503
    assert client.is_ready() is False


def test_meta(client):
    meta = client.meta.get_meta()
    assert meta.version == "1.22.1"
    assert "text2vec-contextionary" in meta.modules


def test_nodes(client, article_class):
    nodes = client.nodes.get_nodes_status().nodes
    assert len(nodes) == 1
    node = nodes[0]
    assert node.status is M.NodeStatus.HEALTHY
    assert node.git_hash == "e6b37ce"
    assert node.stats.shard_count == 1
    assert node.shards[0].class_name == "Article"


def test_oidc_not_configured(client):
    with pytest.raises(NotConfiguredError) as ei:
        client.oidc.get_open_id_configuration()
    assert ei.value.status_code == 404


def test_oidc_configured(client, app):
    app.state.store.oidc_enabled = True
    cfg = client.oidc.get_open_id_configuration()
    assert cfg.client_id == "wcs"
    assert cfg.href.endswith("/openid-configuration")


def test_classification(client, app, article_class):
    req = M.ClassificationRequest(
        class_name="Article",
        classify_properties=["hasCategory"],
        based_on_properties=["title"],
        settings={"k": 3},
    )
    scheduled = client.classification.schedule(req)
    assert scheduled.status == "running"
    assert scheduled.classification_type == "knn"

    sent = app.state.store.classifications[scheduled.id]
    assert sent["class"] == "Article"
    assert sent["classifyProperties"] == ["hasCategory"]
    assert sent["basedOnProperties"] == ["title"]

    done = client.classification.get(scheduled.id)
    assert done.status == "completed"
    assert done.meta.count_succeeded == 0


def test_classification_unknown_id(client):
    with pytest.raises(ClassificationError):
        client.classification.get("00000000-0000-0000-0000-000000000000")


def test_contextionary(client, app):
    concept = client.modules.contextionary_get_concept("cat")
    word = concept.individual_words[0]
    assert word.word == "cat"
    assert word.info.nearest_neighbors[0].word == "feline"

    with pytest.raises(ModuleError):
        client.modules.contextionary_get_concept("unknownword")

    ext = client.modules.contextionary_extend(
        M.ContextionaryExtension(concept="weaviate", definition="an open source vector database")
    )
    assert ext.weight == 1.0
    assert app.state.store.extensions == [
        {"concept": "weaviate", "definition": "an open source vector database", "weight": 1.0}
    ]


def test_api_key_sent_as_bearer(app):
    from fastapi.testclient import TestClient

    from weaviate_community import AuthApiKey, ClientConfig, WeaviateClient

    cfg = ClientConfig(base_url="http://testserver", auth=AuthApiKey("secret"))
    http = TestClient(app, headers=cfg.request_headers())
    with WeaviateClient(cfg, http_client=http) as cli:
        cli.meta.get_meta()
    assert app.state.store.requests[-1].headers["authorization"] == "Bearer secret"
