from dataclasses import dataclass, replace
from typing import Self

from esdsl.queries.base import QueryNode, ensure_query
from esdsl.queries.query import Query
from esdsl.serializer import dump_json, to_dict
from esdsl.types.dsl import SearchBody


@dataclass(frozen=True, slots=True, kw_only=True)
class Search:
    """A search request body: the query plus paging and hit-count options.

    Example body:

    {
      "query": { "match_all": {} },
      "from": 20,
      "size": 10,
      "track_total_hits": true
    }
    """

    query_value: Query | None = None
    from_value: int | None = None
    size_value: int | None = None
    track_total_hits_value: bool | int | None = None
    min_score_value: float | None = None

    def query(self, query: Query) -> Self:
        """Set the query documents must match."""
        return replace(self, query_value=ensure_query(query, QueryNode, "search"))

    def from_(self, value: int) -> Self:
        """Number of hits to skip."""
        return replace(self, from_value=value)

    def size(self, value: int) -> Self:
        """Number of hits to return."""
        return replace(self, size_value=value)

    def track_total_hits(self, value: bool | int) -> Self:
        """Count hits exactly (`True`), not at all (`False`), or up to a limit."""
        return replace(self, track_total_hits_value=value)

    def min_score(self, value: float) -> Self:
        """Minimum `_score` of returned hits."""
        return replace(self, min_score_value=value)

    def to_dict(self) -> SearchBody:
        """Render the request body, leaving out unset options."""
        body: SearchBody = {}
        if self.query_value is not None and not self.query_value.is_omittable():
            body["query"] = to_dict(self.query_value)
        if self.from_value is not None:
            body["from"] = self.from_value
        if self.size_value is not None:
            body["size"] = self.size_value
        if self.track_total_hits_value is not None:
            body["track_total_hits"] = self.track_total_hits_value
        if self.min_score_value is not None:
            body["min_score"] = self.min_score_value
        return body

    def to_json(self) -> bytes:
        """Render the request body as JSON bytes."""
        return dump_json(self.to_dict())
