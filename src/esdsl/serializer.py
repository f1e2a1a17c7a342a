"""Render query trees to Elasticsearch query DSL documents.

Each node becomes `{kind: body}`. Required fields are always written;
optional fields go through `is_omittable` first, so the output carries no
`null`s and no defaulted attributes.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, assert_never

import orjson
from loguru import logger

from esdsl.config.general import CONFIG
from esdsl.params.term import Term
from esdsl.queries.base import BoostAndName, QueryNode
from esdsl.queries.compound import (
    BoolQuery,
    BoostingQuery,
    ConstantScoreQuery,
    DisMaxQuery,
)
from esdsl.queries.leaf import (
    ExistsQuery,
    MatchAllQuery,
    MatchNoneQuery,
    MatchQuery,
    RangeQuery,
    TermQuery,
    TermsQuery,
)
from esdsl.queries.query import Query
from esdsl.queries.span import (
    SpanFieldMaskingQuery,
    SpanFirstQuery,
    SpanNearQuery,
    SpanOrQuery,
    SpanTermQuery,
)
from esdsl.types.dsl import QueryDict
from esdsl.types.general import TimeSpec
from esdsl.utils.omission import compact


def render(value: Any, timespec: TimeSpec) -> Any:
    """Convert a field value into its JSON form."""
    match value:
        case Term():
            return value.to_json(timespec)
        case QueryNode():
            return serialize(value, timespec)  # pyright:ignore[reportArgumentType] every node is a Query member
        case Enum():
            return value.value
        case list() | tuple():
            return [render(item, timespec) for item in value]  # pyright:ignore[reportUnknownVariableType]
        case _:
            return value


def optional_fields(
    pairs: Iterable[tuple[str, Any]], timespec: TimeSpec
) -> dict[str, Any]:
    """Render the pairs whose values aren't omittable."""
    return {key: render(value, timespec) for key, value in compact(pairs).items()}


def boost_and_name(query: BoostAndName) -> list[tuple[str, Any]]:
    """The shared optional attributes, under their wire names."""
    return [("boost", query.boost_value), ("_name", query.query_name)]


def serialize(query: Query, timespec: TimeSpec) -> QueryDict:
    """Recursively render a query tree, depth first."""
    body: dict[str, Any]
    match query:
        case MatchAllQuery() | MatchNoneQuery():
            body = optional_fields(boost_and_name(query), timespec)
        case TermQuery() | SpanTermQuery():
            body = {
                query.field: optional_fields(
                    [("value", query.value), *boost_and_name(query)], timespec
                )
            }
        case TermsQuery():
            body = {
                query.field: render(query.values, timespec),
                **optional_fields(boost_and_name(query), timespec),
            }
        case ExistsQuery():
            body = {
                "field": query.field,
                **optional_fields(boost_and_name(query), timespec),
            }
        case RangeQuery():
            body = {
                query.field: optional_fields(
                    [
                        ("gt", query.greater_than),
                        ("gte", query.greater_than_or_equal_to),
                        ("lt", query.less_than),
                        ("lte", query.less_than_or_equal_to),
                        ("format", query.date_format),
                        ("time_zone", query.time_zone_id),
                        *boost_and_name(query),
                    ],
                    timespec,
                )
            }
        case MatchQuery():
            body = {
                query.field: optional_fields(
                    [
                        ("query", query.query),
                        ("operator", query.match_operator),
                        ("zero_terms_query", query.zero_terms),
                        *boost_and_name(query),
                    ],
                    timespec,
                )
            }
        case ConstantScoreQuery():
            body = {
                "filter": serialize(query.filter, timespec),
                **optional_fields(boost_and_name(query), timespec),
            }
        case BoolQuery():
            body = optional_fields(
                [
                    ("must", query.must_clauses),
                    ("filter", query.filter_clauses),
                    ("should", query.should_clauses),
                    ("must_not", query.must_not_clauses),
                    ("minimum_should_match", query.min_should_match),
                    *boost_and_name(query),
                ],
                timespec,
            )
        case BoostingQuery():
            body = {
                "positive": serialize(query.positive, timespec),
                "negative": serialize(query.negative, timespec),
                "negative_boost": query.negative_boost,
                **optional_fields(boost_and_name(query), timespec),
            }
        case DisMaxQuery():
            body = {
                "queries": render(query.queries, timespec),
                **optional_fields(
                    [("tie_breaker", query.tie_breaker_value), *boost_and_name(query)],
                    timespec,
                ),
            }
        case SpanFirstQuery():
            body = {"match": serialize(query.match, timespec), "end": query.end}
        case SpanNearQuery():
            body = {
                "clauses": render(query.clauses, timespec),
                "slop": query.slop,
                **optional_fields([("in_order", query.in_order_value)], timespec),
            }
        case SpanOrQuery():
            body = {"clauses": render(query.clauses, timespec)}
        case SpanFieldMaskingQuery():
            body = {"query": serialize(query.query, timespec), "field": query.field}
        case _:
            assert_never(query)
    return {query.KIND: body}


def to_dict(query: Query) -> QueryDict:
    """Render a query tree with the configured timestamp precision."""
    logger.bind(kind=query.KIND).trace("Serializing query")
    return serialize(query, CONFIG.serialization.datetime_timespec)


def dump_json(document: Mapping[str, Any]) -> bytes:
    """Encode a rendered document as compact JSON."""
    option = orjson.OPT_SORT_KEYS if CONFIG.serialization.sort_keys else 0
    return orjson.dumps(document, option=option)


def to_json(query: Query) -> bytes:
    """Render a query tree straight to JSON bytes."""
    return dump_json(to_dict(query))
