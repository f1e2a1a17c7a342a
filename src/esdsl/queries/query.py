"""The query tree and the factories that build it.

Every factory takes only the required arguments of its query kind; optional
attributes are set afterwards through chaining methods:

    constant_score(term("user.id", 123)).boost(3).name("by_user")
"""

from collections.abc import Iterable

from esdsl.params.term import Term, TermLiteral
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
from esdsl.queries.span import (
    SpanFieldMaskingQuery,
    SpanFirstQuery,
    SpanNearQuery,
    SpanOrQuery,
    SpanTermQuery,
)

type SpanQuery = (
    SpanTermQuery
    | SpanFirstQuery
    | SpanNearQuery
    | SpanOrQuery
    | SpanFieldMaskingQuery
)

type Query = (
    MatchAllQuery
    | MatchNoneQuery
    | TermQuery
    | TermsQuery
    | ExistsQuery
    | RangeQuery
    | MatchQuery
    | ConstantScoreQuery
    | BoolQuery
    | BoostingQuery
    | DisMaxQuery
    | SpanQuery
)


def match_all() -> MatchAllQuery:
    """Create a `match_all` query."""
    return MatchAllQuery()


def match_none() -> MatchNoneQuery:
    """Create a `match_none` query."""
    return MatchNoneQuery()


def term(field: str, value: TermLiteral | Term) -> TermQuery:
    """Create a `term` query for an exact value in `field`."""
    return TermQuery(field, Term.of(value))


def terms(field: str, values: Iterable[TermLiteral | Term]) -> TermsQuery:
    """Create a `terms` query. Absent values are dropped."""
    wrapped = (Term.of(value) for value in values)
    return TermsQuery(field, tuple(v for v in wrapped if not v.is_absent))


def exists(field: str) -> ExistsQuery:
    """Create an `exists` query."""
    return ExistsQuery(field)


def range_(field: str) -> RangeQuery:
    """Create a `range` query; set bounds with `gt`, `gte`, `lt` and `lte`."""
    return RangeQuery(field)


def match(field: str, query: TermLiteral | Term) -> MatchQuery:
    """Create a full-text `match` query."""
    return MatchQuery(field, Term.of(query))


def constant_score(filter: Query) -> ConstantScoreQuery:
    """Create a `constant_score` query.

    - `filter` - query every returned document must match. It runs in filter
      context and does not compute relevance scores.
    """
    return ConstantScoreQuery(filter)


def bool_() -> BoolQuery:
    """Create an empty `bool` query; add clauses with `must`, `filter`, `should` and `must_not`."""
    return BoolQuery()


def boosting(positive: Query, negative: Query, negative_boost: float) -> BoostingQuery:
    """Create a `boosting` query."""
    return BoostingQuery(positive, negative, negative_boost)


def dis_max(*queries: Query) -> DisMaxQuery:
    """Create a `dis_max` query over the given sub-queries."""
    return DisMaxQuery().query(*queries)


def span_term(field: str, value: TermLiteral | Term) -> SpanTermQuery:
    """Create a `span_term` query."""
    return SpanTermQuery(field, Term.of(value))


def span_first(match: SpanQuery, end: int) -> SpanFirstQuery:
    """Create a `span_first` query."""
    return SpanFirstQuery(match, end)


def span_near(*clauses: SpanQuery, slop: int) -> SpanNearQuery:
    """Create a `span_near` query."""
    return SpanNearQuery(clauses, slop)


def span_or(*clauses: SpanQuery) -> SpanOrQuery:
    """Create a `span_or` query."""
    return SpanOrQuery(clauses)


def span_field_masking(query: SpanQuery, field: str) -> SpanFieldMaskingQuery:
    """Create a `span_field_masking` query masking `query` as a search on `field`."""
    return SpanFieldMaskingQuery(query, field)
