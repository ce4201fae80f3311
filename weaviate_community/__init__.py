# weaviate_community/__init__.py
import logging

from .auth import AuthApiKey
from .config import ClientConfig, Settings
from .client import WeaviateClient
from .logging_config import configure_logging
from .query import (
    AggregateBuilder,
    AggregateQuery,
    ExploreBuilder,
    ExploreQuery,
    GetBuilder,
    GetQuery,
    GraphQLQuery,
    NearKind,
    NearSelector,
    RawQuery,
)
from . import models
from . import exceptions

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AuthApiKey",
    "ClientConfig",
    "Settings",
    "WeaviateClient",
    "configure_logging",
    "AggregateBuilder",
    "AggregateQuery",
    "ExploreBuilder",
    "ExploreQuery",
    "GetBuilder",
    "GetQuery",
    "GraphQLQuery",
    "NearKind",
    "NearSelector",
    "RawQuery",
    "models",
    "exceptions",
]
