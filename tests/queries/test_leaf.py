from datetime import UTC, datetime

from utils.general import assert_serialize  # pyright:ignore[reportImplicitRelativeImport]

from esdsl.params.enums import Operator, ZeroTermsQuery
from esdsl.params.term import Term
from esdsl.queries.query import (
    exists,
    match,
    match_all,
    match_none,
    range_,
    term,
    terms,
)


def test_match_all_serialization() -> None:
    assert_serialize(match_all(), {"match_all": {}})

    assert_serialize(
        match_all().boost(2).name("test"),
        {"match_all": {"boost": 2, "_name": "test"}},
    )


def test_match_none_serialization() -> None:
    assert_serialize(match_none(), {"match_none": {}})
    assert_serialize(match_none().name("nothing"), {"match_none": {"_name": "nothing"}})


def test_mutators_return_copies() -> None:
    query = match_all()
    boosted = query.boost(2)

    assert query.boost_value is None
    assert boosted.boost_value == 2
    assert boosted != query


def test_term_serialization() -> None:
    assert_serialize(term("test", 123), {"term": {"test": {"value": 123}}})
    assert_serialize(term("test", True), {"term": {"test": {"value": True}}})
    assert_serialize(term("test", 1.5), {"term": {"test": {"value": 1.5}}})
    assert_serialize(
        term("test", "text").boost(2).name("test"),
        {"term": {"test": {"value": "text", "boost": 2, "_name": "test"}}},
    )
    assert_serialize(
        term("created", datetime(2021, 3, 10, 10, 42, tzinfo=UTC)),
        {"term": {"created": {"value": "2021-03-10T10:42:00Z"}}},
    )


def test_term_accepts_explicit_kinds() -> None:
    assert term("test", Term.unsigned(16)) == term("test", 16)
    assert_serialize(term("test", Term.float32(0.5)), {"term": {"test": {"value": 0.5}}})


def test_term_omission() -> None:
    assert term("test", "").is_omittable()
    assert term("test", None).is_omittable()
    assert not term("test", 0).is_omittable()


def test_terms_serialization() -> None:
    assert_serialize(
        terms("user.id", ["kimchy", "elkbee", None]).boost(1.5),
        {"terms": {"user.id": ["kimchy", "elkbee"], "boost": 1.5}},
    )
    assert terms("user.id", []).is_omittable()
    assert terms("user.id", [None]).is_omittable()


def test_exists_serialization() -> None:
    assert_serialize(exists("user"), {"exists": {"field": "user"}})
    assert exists("").is_omittable()


def test_range_serialization() -> None:
    assert_serialize(
        range_("age").gte(10).lt(20).boost(2),
        {"range": {"age": {"gte": 10, "lt": 20, "boost": 2}}},
    )
    assert_serialize(
        range_("timestamp")
        .gt(datetime(2020, 1, 1, tzinfo=UTC))
        .format("strict_date_optional_time")
        .time_zone("+01:00"),
        {
            "range": {
                "timestamp": {
                    "gt": "2020-01-01T00:00:00Z",
                    "format": "strict_date_optional_time",
                    "time_zone": "+01:00",
                }
            }
        },
    )


def test_range_omission() -> None:
    assert range_("age").is_omittable()
    assert range_("age").format("yyyy").is_omittable()
    assert not range_("age").lte(0).is_omittable()


def test_match_serialization() -> None:
    assert_serialize(
        match("message", "this is a test"),
        {"match": {"message": {"query": "this is a test"}}},
    )
    assert_serialize(
        match("message", "to be or not to be")
        .operator(Operator.AND)
        .zero_terms_query(ZeroTermsQuery.ALL)
        .name("quote"),
        {
            "match": {
                "message": {
                    "query": "to be or not to be",
                    "operator": "and",
                    "zero_terms_query": "all",
                    "_name": "quote",
                }
            }
        },
    )
    assert match("message", "").is_omittable()
