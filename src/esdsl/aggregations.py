from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self, override


@dataclass(frozen=True, slots=True, order=True)
class AggregationName:
    """Name an aggregation is requested and returned under."""

    value: str

    @classmethod
    def of(cls, value: object) -> Self:
        """Build a name from anything with a string form."""
        if isinstance(value, cls):
            return value
        return cls(str(value))

    @override
    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class AggregationsHandler:
    """Read-only access to the `aggregations` section of a search response."""

    aggregations: Mapping[str, Any] | None = None

    def terms(self, aggregation_name: str | AggregationName) -> Any | None:
        """Return the container of a terms aggregation, or None if it's missing."""
        if not isinstance(self.aggregations, Mapping):
            return None
        return self.aggregations.get(str(aggregation_name))
