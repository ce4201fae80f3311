# weaviate_community/graphql.py
from __future__ import annotations
from typing import TYPE_CHECKING, Any

from .exceptions import GraphQLError
from .query import AggregateQuery, ExploreQuery, GetQuery, GraphQLQuery, RawQuery

if TYPE_CHECKING:
    from .client import WeaviateClient

GRAPHQL_PATH = "/v1/graphql"


class GraphQL:
    """Sends built query documents to ``/v1/graphql``.

    A 200 response is returned decoded and untouched; GraphQL-level problems
    arrive in its ``errors`` key and are left for the caller. Any other status
    raises ``GraphQLError`` with the status code and body.
    """

    def __init__(self, core: WeaviateClient):
        self.core = core

    def execute(self, query: GraphQLQuery, *, action: str = "GraphQL query") -> dict[str, Any]:
        r = self.core._request("POST", GRAPHQL_PATH, json=query.model_dump(), error=GraphQLError, action=action)
        return self.core._json(r, action)

    def get(self, query: GetQuery) -> dict[str, Any]:
        return self.execute(query, action="GraphQL Get")

    def aggregate(self, query: AggregateQuery) -> dict[str, Any]:
        return self.execute(query, action="GraphQL Aggregate")

    def explore(self, query: ExploreQuery) -> dict[str, Any]:
        return self.execute(query, action="GraphQL Explore")

    def raw(self, query: RawQuery | str) -> dict[str, Any]:
        if isinstance(query, str):
            query = RawQuery(query)
        return self.execute(query, action="GraphQL raw query")
