"""Queries that match documents directly, without wrapping other queries."""

from dataclasses import dataclass, replace
from typing import ClassVar, Self, override

from esdsl.params.enums import Operator, ZeroTermsQuery
from esdsl.params.term import Term, TermLiteral
from esdsl.queries.base import BoostAndName
from esdsl.utils.omission import is_omittable


@dataclass(frozen=True, slots=True)
class MatchAllQuery(BoostAndName):
    """Matches every document, giving them all a `_score` of `1.0`.

    <https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-match-all-query.html>
    """

    KIND: ClassVar[str] = "match_all"


@dataclass(frozen=True, slots=True)
class MatchNoneQuery(BoostAndName):
    """Matches no documents. The inverse of `match_all`."""

    KIND: ClassVar[str] = "match_none"


@dataclass(frozen=True, slots=True)
class TermQuery(BoostAndName):
    """Documents containing an exact term in a provided field.

    Avoid it for `text` fields; use `match` instead.

    <https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-term-query.html>
    """

    KIND: ClassVar[str] = "term"

    field: str
    value: Term

    @override
    def is_omittable(self) -> bool:
        return self.value.is_omittable()


@dataclass(frozen=True, slots=True)
class TermsQuery(BoostAndName):
    """Documents containing one or more exact terms in a provided field."""

    KIND: ClassVar[str] = "terms"

    field: str
    values: tuple[Term, ...]

    @override
    def is_omittable(self) -> bool:
        return is_omittable(self.values)


@dataclass(frozen=True, slots=True)
class ExistsQuery(BoostAndName):
    """Documents that contain an indexed value for a field."""

    KIND: ClassVar[str] = "exists"

    field: str

    @override
    def is_omittable(self) -> bool:
        return is_omittable(self.field)


@dataclass(frozen=True, slots=True)
class RangeQuery(BoostAndName):
    """Documents with field values inside a range.

    Bounds are set through `gt`, `gte`, `lt` and `lte`; unset bounds are
    left out of the document.
    """

    KIND: ClassVar[str] = "range"

    field: str
    greater_than: Term = Term()
    greater_than_or_equal_to: Term = Term()
    less_than: Term = Term()
    less_than_or_equal_to: Term = Term()
    date_format: str | None = None
    time_zone_id: str | None = None

    def gt(self, value: TermLiteral) -> Self:
        """Greater than."""
        return replace(self, greater_than=Term.of(value))

    def gte(self, value: TermLiteral) -> Self:
        """Greater than or equal to."""
        return replace(self, greater_than_or_equal_to=Term.of(value))

    def lt(self, value: TermLiteral) -> Self:
        """Less than."""
        return replace(self, less_than=Term.of(value))

    def lte(self, value: TermLiteral) -> Self:
        """Less than or equal to."""
        return replace(self, less_than_or_equal_to=Term.of(value))

    def format(self, value: str) -> Self:
        """Date format used to convert `date` values in the query."""
        return replace(self, date_format=value)

    def time_zone(self, value: str) -> Self:
        """UTC offset or IANA time zone used to convert `date` values."""
        return replace(self, time_zone_id=value)

    @override
    def is_omittable(self) -> bool:
        return all(
            bound.is_omittable()
            for bound in (
                self.greater_than,
                self.greater_than_or_equal_to,
                self.less_than,
                self.less_than_or_equal_to,
            )
        )


@dataclass(frozen=True, slots=True)
class MatchQuery(BoostAndName):
    """Full-text match of analyzed text, numbers, dates or booleans.

    <https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-match-query.html>
    """

    KIND: ClassVar[str] = "match"

    field: str
    query: Term
    match_operator: Operator | None = None
    zero_terms: ZeroTermsQuery | None = None

    def operator(self, value: Operator) -> Self:
        """Boolean logic used to interpret the analyzed query text."""
        return replace(self, match_operator=Operator(value))

    def zero_terms_query(self, value: ZeroTermsQuery) -> Self:
        """What to return when the analyzer removes every token."""
        return replace(self, zero_terms=ZeroTermsQuery(value))

    @override
    def is_omittable(self) -> bool:
        return self.query.is_omittable()
