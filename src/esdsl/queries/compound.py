"""Queries that wrap other queries, combining their results and scores."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Self, override

from esdsl.queries.base import BoostAndName, QueryNode, ensure_query, keep_clauses
from esdsl.utils.omission import is_omittable

if TYPE_CHECKING:
    from esdsl.queries.query import Query


@dataclass(frozen=True, slots=True)
class ConstantScoreQuery(BoostAndName):
    """Wraps a filter query and scores every match with the `boost` value.

    Filter queries don't calculate relevance scores, and Elasticsearch caches
    frequently used ones.

    <https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-constant-score-query.html>
    """

    KIND: ClassVar[str] = "constant_score"

    filter: Query

    def __post_init__(self) -> None:
        ensure_query(self.filter, QueryNode, self.KIND)

    @override
    def is_omittable(self) -> bool:
        return is_omittable(self.filter)


@dataclass(frozen=True, slots=True)
class BoolQuery(BoostAndName):
    """Documents matching boolean combinations of other queries.

    Clauses that would serialize to nothing are dropped as they are added.

    <https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-bool-query.html>
    """

    KIND: ClassVar[str] = "bool"

    must_clauses: tuple[Query, ...] = ()
    filter_clauses: tuple[Query, ...] = ()
    should_clauses: tuple[Query, ...] = ()
    must_not_clauses: tuple[Query, ...] = ()
    min_should_match: int | str | None = None

    def must(self, *queries: Query) -> Self:
        """Clauses that must appear in matching documents and contribute to the score."""
        return replace(
            self, must_clauses=keep_clauses(self.must_clauses, queries, "bool.must")
        )

    def filter(self, *queries: Query) -> Self:
        """Clauses that must appear in matching documents, ignoring the score."""
        return replace(
            self,
            filter_clauses=keep_clauses(self.filter_clauses, queries, "bool.filter"),
        )

    def should(self, *queries: Query) -> Self:
        """Clauses that should appear in matching documents."""
        return replace(
            self,
            should_clauses=keep_clauses(self.should_clauses, queries, "bool.should"),
        )

    def must_not(self, *queries: Query) -> Self:
        """Clauses that must not appear in matching documents."""
        return replace(
            self,
            must_not_clauses=keep_clauses(
                self.must_not_clauses, queries, "bool.must_not"
            ),
        )

    def minimum_should_match(self, value: int | str) -> Self:
        """Number or percentage of `should` clauses a document must match."""
        return replace(self, min_should_match=value)

    @override
    def is_omittable(self) -> bool:
        return all(
            is_omittable(clauses)
            for clauses in (
                self.must_clauses,
                self.filter_clauses,
                self.should_clauses,
                self.must_not_clauses,
            )
        )


@dataclass(frozen=True, slots=True)
class BoostingQuery(BoostAndName):
    """Matches `positive`, demoting documents that also match `negative`."""

    KIND: ClassVar[str] = "boosting"

    positive: Query
    negative: Query
    negative_boost: float

    def __post_init__(self) -> None:
        ensure_query(self.positive, QueryNode, "boosting.positive")
        ensure_query(self.negative, QueryNode, "boosting.negative")

    @override
    def is_omittable(self) -> bool:
        return is_omittable(self.positive) or is_omittable(self.negative)


@dataclass(frozen=True, slots=True)
class DisMaxQuery(BoostAndName):
    """Scores documents by the best matching sub-query.

    `tie_breaker` adds a share of the other matching sub-queries' scores.
    """

    KIND: ClassVar[str] = "dis_max"

    queries: tuple[Query, ...] = ()
    tie_breaker_value: float | None = None

    def query(self, *queries: Query) -> Self:
        """Add sub-queries."""
        return replace(
            self, queries=keep_clauses(self.queries, queries, "dis_max.queries")
        )

    def tie_breaker(self, value: float) -> Self:
        """Weight, between 0 and 1, of the non-best matching sub-queries."""
        return replace(self, tie_breaker_value=value)

    @override
    def is_omittable(self) -> bool:
        return is_omittable(self.queries)
