from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Self

from loguru import logger

from esdsl.utils.omission import is_omittable


@dataclass(frozen=True, slots=True)
class QueryNode:
    """Common ground of every query kind.

    `KIND` is the key the query is serialized under. Nodes are immutable;
    chaining methods return modified copies.
    """

    KIND: ClassVar[str] = ""

    def is_omittable(self) -> bool:
        """Queries are kept unless a kind says otherwise."""
        return False


@dataclass(frozen=True, slots=True, kw_only=True)
class BoostAndName(QueryNode):
    """Relevance boost and query name, shared by most query kinds."""

    boost_value: float | None = None
    query_name: str | None = None

    def boost(self, value: float) -> Self:
        """Set the multiplier applied to this query's relevance score.

        Values between 0 and 1 decrease relevance, greater values increase it.
        """
        return replace(self, boost_value=value)

    def name(self, value: str) -> Self:
        """Set a name reported in the `matched_queries` of each hit."""
        return replace(self, query_name=value)


def ensure_query[T](value: Any, allowed: type[T] | tuple[type[T], ...], context: str) -> T:
    """Raise TypeError unless `value` is one of the allowed query kinds."""
    if not isinstance(value, allowed):
        raise TypeError(
            f"{context} does not accept {type(value).__name__} as a sub-query"
        )
    return value


def keep_clauses[T: QueryNode](
    existing: tuple[T, ...], added: Iterable[T], context: str
) -> tuple[T, ...]:
    """Append clauses, dropping those with nothing to contribute."""
    kept = list(existing)
    for clause in added:
        ensure_query(clause, QueryNode, context)
        if is_omittable(clause):
            logger.trace(f"Dropping omittable {clause.KIND} clause from {context}")
            continue
        kept.append(clause)
    return tuple(kept)
