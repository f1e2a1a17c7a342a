from typing import Any, NotRequired, TypedDict

QueryDict = dict[str, Any]
"""A serialized query: a single key naming the query kind, mapped to its body."""

# `from` is a keyword, so the functional syntax is required
SearchBody = TypedDict(
    "SearchBody",
    {
        "query": NotRequired[QueryDict],
        "from": NotRequired[int],
        "size": NotRequired[int],
        "track_total_hits": NotRequired[bool | int],
        "min_score": NotRequired[float],
    },
)
