from esdsl.aggregations import AggregationName, AggregationsHandler

RESPONSE = {
    "genres": {
        "doc_count_error_upper_bound": 0,
        "sum_other_doc_count": 0,
        "buckets": [
            {"key": "electronic", "doc_count": 6},
            {"key": "rock", "doc_count": 3},
        ],
    }
}


def test_terms_lookup() -> None:
    handler = AggregationsHandler(RESPONSE)

    assert handler.terms("genres") is RESPONSE["genres"]
    assert handler.terms(AggregationName("genres")) is RESPONSE["genres"]


def test_terms_missing() -> None:
    assert AggregationsHandler(RESPONSE).terms("artists") is None
    assert AggregationsHandler(None).terms("genres") is None
    assert AggregationsHandler().terms("genres") is None
    assert AggregationsHandler([1, 2]).terms("genres") is None  # pyright:ignore[reportArgumentType]


def test_aggregation_name() -> None:
    assert AggregationName.of(123) == AggregationName("123")
    assert str(AggregationName.of("genres")) == "genres"
    assert AggregationName.of(AggregationName("a")) == AggregationName("a")
    assert sorted([AggregationName("b"), AggregationName("a")]) == [
        AggregationName("a"),
        AggregationName("b"),
    ]
    assert len({AggregationName("a"), AggregationName.of("a")}) == 1
