import pytest
from utils.general import assert_serialize  # pyright:ignore[reportImplicitRelativeImport]

from esdsl.queries.query import (
    bool_,
    boosting,
    constant_score,
    dis_max,
    match_all,
    term,
    terms,
)


def test_constant_score_serialization() -> None:
    assert_serialize(
        constant_score(term("test1", 123)),
        {"constant_score": {"filter": {"term": {"test1": {"value": 123}}}}},
    )

    assert_serialize(
        constant_score(term("test1", 123)).boost(3).name("test"),
        {
            "constant_score": {
                "filter": {"term": {"test1": {"value": 123}}},
                "boost": 3,
                "_name": "test",
            }
        },
    )


def test_constant_score_omission_delegates_to_filter() -> None:
    assert constant_score(term("test1", "")).is_omittable()
    assert not constant_score(term("test1", 123)).is_omittable()
    assert constant_score(constant_score(terms("ids", []))).is_omittable()


def test_constant_score_rejects_non_query() -> None:
    with pytest.raises(TypeError):
        constant_score("test1")  # pyright:ignore[reportArgumentType]


def test_bool_serialization() -> None:
    query = (
        bool_()
        .must(term("user.id", "kimchy"))
        .filter(term("tags", "production"))
        .must_not(term("age", 10))
        .should(term("tags", "env1"), term("tags", "deployed"))
        .minimum_should_match(1)
        .boost(1.0)
    )

    assert_serialize(
        query,
        {
            "bool": {
                "must": [{"term": {"user.id": {"value": "kimchy"}}}],
                "filter": [{"term": {"tags": {"value": "production"}}}],
                "should": [
                    {"term": {"tags": {"value": "env1"}}},
                    {"term": {"tags": {"value": "deployed"}}},
                ],
                "must_not": [{"term": {"age": {"value": 10}}}],
                "minimum_should_match": 1,
                "boost": 1.0,
            }
        },
    )


def test_bool_drops_omittable_clauses() -> None:
    query = bool_().must(term("a", ""), term("b", 1)).filter(terms("c", []))

    assert len(query.must_clauses) == 1
    assert query.filter_clauses == ()
    assert_serialize(query, {"bool": {"must": [{"term": {"b": {"value": 1}}}]}})


def test_empty_bool_is_omittable() -> None:
    assert bool_().is_omittable()
    assert bool_().should(term("a", None)).is_omittable()
    assert_serialize(bool_(), {"bool": {}})
    assert constant_score(bool_()).is_omittable()


def test_bool_rejects_non_query_clause() -> None:
    with pytest.raises(TypeError):
        bool_().must({"term": {"a": 1}})  # pyright:ignore[reportArgumentType]


def test_boosting_serialization() -> None:
    assert_serialize(
        boosting(term("text", "apple"), term("text", "pie"), 0.5),
        {
            "boosting": {
                "positive": {"term": {"text": {"value": "apple"}}},
                "negative": {"term": {"text": {"value": "pie"}}},
                "negative_boost": 0.5,
            }
        },
    )
    assert boosting(term("text", ""), match_all(), 0.5).is_omittable()


def test_dis_max_serialization() -> None:
    assert_serialize(
        dis_max(term("title", "Quick pets"), term("body", "Quick pets"), term("x", ""))
        .tie_breaker(0.7),
        {
            "dis_max": {
                "queries": [
                    {"term": {"title": {"value": "Quick pets"}}},
                    {"term": {"body": {"value": "Quick pets"}}},
                ],
                "tie_breaker": 0.7,
            }
        },
    )
    assert dis_max().is_omittable()
