import pytest
from fastapi.testclient import TestClient

from fake_weaviate import create_app
from weaviate_community import ClientConfig, WeaviateClient, models as M


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    cfg = ClientConfig(base_url="http://testserver", backup_poll_interval_s=0.01)
    with WeaviateClient(cfg, http_client=TestClient(app)) as cli:
        yield cli


@pytest.fixture
def article_class(client):
    return client.schema.create_class(M.Class(
        class_name="Article",
        properties=[
            M.Property(name="title", data_type=["text"]),
            M.Property(name="wordCount", data_type=["int"]),
        ],
    ))
