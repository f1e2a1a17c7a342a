"""Position-aware span queries.

Span queries only compose with other span queries; composite kinds reject
any other sub-query with a TypeError.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Self, override

from esdsl.params.term import Term
from esdsl.queries.base import BoostAndName, QueryNode, ensure_query

if TYPE_CHECKING:
    from esdsl.queries.query import SpanQuery


def ensure_span(value: object, context: str) -> SpanQuery:
    """Raise TypeError unless `value` is a span query."""
    return ensure_query(value, SPAN_KINDS, context)


@dataclass(frozen=True, slots=True)
class SpanTermQuery(BoostAndName):
    """Spans containing an exact term."""

    KIND: ClassVar[str] = "span_term"

    field: str
    value: Term

    @override
    def is_omittable(self) -> bool:
        return self.value.is_omittable()


@dataclass(frozen=True, slots=True)
class SpanFirstQuery(QueryNode):
    """Spans near the beginning of a field, ending at or before `end`."""

    KIND: ClassVar[str] = "span_first"

    match: SpanQuery
    end: int

    def __post_init__(self) -> None:
        ensure_span(self.match, "span_first.match")


@dataclass(frozen=True, slots=True)
class SpanNearQuery(QueryNode):
    """Spans whose clauses are near one another.

    `slop` is the maximum number of intervening unmatched positions.
    """

    KIND: ClassVar[str] = "span_near"

    clauses: tuple[SpanQuery, ...]
    slop: int
    in_order_value: bool | None = None

    def __post_init__(self) -> None:
        for clause in self.clauses:
            ensure_span(clause, "span_near.clauses")

    def in_order(self, value: bool) -> Self:
        """Require the clauses to match in the given order."""
        return replace(self, in_order_value=value)


@dataclass(frozen=True, slots=True)
class SpanOrQuery(QueryNode):
    """The union of its span clauses."""

    KIND: ClassVar[str] = "span_or"

    clauses: tuple[SpanQuery, ...]

    def __post_init__(self) -> None:
        for clause in self.clauses:
            ensure_span(clause, "span_or.clauses")


@dataclass(frozen=True, slots=True)
class SpanFieldMaskingQuery(QueryNode):
    """Lets a span query on one field take part in a span query on another.

    The wrapped query pretends to search `field`, which allows `span_near`
    or `span_or` across multi-fields indexed with different analyzers.
    Scoring uses the norms of the masked field name.

    <https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-span-field-masking-query.html>
    """

    KIND: ClassVar[str] = "span_field_masking"

    query: SpanQuery
    field: str

    def __post_init__(self) -> None:
        ensure_span(self.query, "span_field_masking.query")


SPAN_KINDS: tuple[type[QueryNode], ...] = (
    SpanTermQuery,
    SpanFirstQuery,
    SpanNearQuery,
    SpanOrQuery,
    SpanFieldMaskingQuery,
)
