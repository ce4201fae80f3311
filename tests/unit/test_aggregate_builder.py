import pytest

from weaviate_community import AggregateBuilder, AggregateQuery, NearKind
from weaviate_community.exceptions import QueryBuildError


def _squash(text: str) -> str:
    return " ".join(text.split())


def test_meta_count_only():
    q = AggregateBuilder("Article").with_meta_count().build()
    assert isinstance(q, AggregateQuery)
    assert "(" not in q.query
    assert _squash(q.query) == "{ Aggregate { Article { meta{count} } } }"


def test_fields_follow_meta_count():
    q = AggregateBuilder("Article").with_meta_count().with_fields(["wordCount { mean }"]).build()
    assert _squash(q.query) == "{ Aggregate { Article { meta{count} wordCount { mean } } } }"


def test_clause_order():
    q = (
        AggregateBuilder("Article")
        .with_limit(2)
        .with_tenant("t1")
        .with_object_limit(100)
        .with_near_text('{concepts: ["news"]}')
        .with_group_by('["inPublication"]')
        .with_where('{path: ["wordCount"], operator: GreaterThan, valueInt: 10}')
        .with_fields(["groupedBy { value path }"])
        .build()
    )
    lines = [line.strip() for line in q.query.splitlines()]
    start = lines.index("(")
    assert lines[start + 1:start + 8] == [
        'where: {path: ["wordCount"], operator: GreaterThan, valueInt: 10}',
        'groupBy: ["inPublication"]',
        'nearText: {concepts: ["news"]}',
        "objectLimit: 100",
        'tenant: "t1"',
        "limit: 2",
        ")",
    ]


def test_near_renders_its_own_value_not_the_where_clause():
    q = (
        AggregateBuilder("Article")
        .with_where("{W}")
        .with_near_vector("{vector: [1.0]}")
        .build()
        .query
    )
    assert "nearVector: {vector: [1.0]}" in q
    assert q.count("{W}") == 1


def test_group_by_filter_alias():
    b = AggregateBuilder("Article").with_group_by_filter('["x"]')
    assert b.group_by == '["x"]'


def test_near_replacement_keeps_one():
    b = AggregateBuilder("Article").with_near_text("{t}").with_near_object("{o}")
    assert b.near.kind is NearKind.OBJECT
    assert "nearText" not in b.build().query


def test_builder_factory_and_validation():
    assert AggregateQuery.builder("Article").with_meta_count().build() == AggregateBuilder("Article").with_meta_count().build()
    with pytest.raises(QueryBuildError):
        AggregateBuilder("")


@pytest.mark.parametrize("setter", ["with_where", "with_group_by", "with_near_text", "with_tenant"])
def test_blank_clause_is_not_rendered(setter):
    q = getattr(AggregateBuilder("Article"), setter)("  ").with_meta_count().build().query
    assert "(" not in q
