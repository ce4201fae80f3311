import pytest
from pydantic import ValidationError

from weaviate_community import ExploreBuilder, ExploreQuery, GraphQLQuery, RawQuery
from weaviate_community.exceptions import QueryBuildError


def _squash(text: str) -> str:
    return " ".join(text.split())


def test_explore_requires_near():
    with pytest.raises(QueryBuildError):
        ExploreBuilder().with_limit(1).build()


def test_explore_layout():
    q = (
        ExploreBuilder()
        .with_near_text('{concepts: ["ocean"]}')
        .with_limit(1)
        .with_fields(["beacon", "certainty", "className"])
        .build()
    )
    assert isinstance(q, ExploreQuery)
    assert q.query.splitlines() == [
        "{",
        "  Explore",
        "  (",
        "    limit: 1",
        '    nearText: {concepts: ["ocean"]}',
        "  )",
        "  {",
        "    beacon certainty className",
        "  }",
        "}",
    ]


def test_explore_always_has_filter_block_and_no_limit_line_by_default():
    q = ExploreBuilder().with_near_vector("{vector: [0.1]}").build().query
    assert _squash(q) == "{ Explore ( nearVector: {vector: [0.1]} ) { } }"


def test_explore_second_near_replaces_first(caplog):
    b = ExploreBuilder().with_near_text("{t}").with_near_vector("{v}")
    assert "nearText" not in b.build().query
    assert any("nearVector" in r.getMessage() for r in caplog.records)


def test_explore_factory():
    assert isinstance(ExploreQuery.builder(), ExploreBuilder)


def test_raw_query_passthrough():
    text = '{\n  Get { Article(where: {path: ["a"]}) { title } }\n}\t'
    q = RawQuery(text)
    assert q.query == text
    assert str(q) == text
    assert q.model_dump() == {"query": text}
    assert isinstance(q, GraphQLQuery)


def test_queries_are_immutable():
    q = RawQuery("{}")
    with pytest.raises(ValidationError):
        q.query = "{ x }"


def test_keyword_construction():
    assert RawQuery(query="{}") == RawQuery("{}")


def test_explore_blank_near_counts_as_missing():
    with pytest.raises(QueryBuildError):
        ExploreBuilder().with_near_text("  ").build()
