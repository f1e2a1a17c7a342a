"""Leaf values accepted by term-level query clauses."""

import math
import struct
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Self, override

from esdsl.types.general import TimeSpec
from esdsl.utils.omission import is_omittable

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1

type TermLiteral = bool | str | int | float | datetime | None
type TermScalar = bool | str | int | float | datetime


class TermKind(StrEnum):
    """The scalar kinds a Term can hold."""

    BOOL = "bool"
    STRING = "string"
    SIGNED_INTEGER = "signed_integer"
    UNSIGNED_INTEGER = "unsigned_integer"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DATETIME = "datetime"


# Kinds sharing a rank are ordered against each other by value.
_KIND_RANK: dict[TermKind, int] = {
    TermKind.BOOL: 0,
    TermKind.STRING: 1,
    TermKind.SIGNED_INTEGER: 2,
    TermKind.UNSIGNED_INTEGER: 2,
    TermKind.FLOAT32: 3,
    TermKind.FLOAT64: 3,
    TermKind.DATETIME: 4,
}

_NUMERIC_KINDS = frozenset(
    {
        TermKind.SIGNED_INTEGER,
        TermKind.UNSIGNED_INTEGER,
        TermKind.FLOAT32,
        TermKind.FLOAT64,
    }
)

_CONSTRUCTOR_NAMES: dict[TermKind, str] = {
    TermKind.BOOL: "boolean",
    TermKind.STRING: "string",
    TermKind.SIGNED_INTEGER: "signed",
    TermKind.UNSIGNED_INTEGER: "unsigned",
    TermKind.FLOAT32: "float32",
    TermKind.FLOAT64: "float64",
    TermKind.DATETIME: "timestamp",
}


def to_float32(value: float) -> float:
    """Round a float to the nearest 32-bit float, saturating to infinity."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def wrap_signed(value: int) -> int:
    """Wrap an int into the signed 64-bit range."""
    value &= U64_MAX
    return value - 2**64 if value > I64_MAX else value


def wrap_unsigned(value: int) -> int:
    """Wrap an int into the unsigned 64-bit range."""
    return value & U64_MAX


def _unsigned_as_signed(value: Any) -> int | None:
    return value if value <= I64_MAX else None


def _signed_as_unsigned(value: Any) -> int | None:
    return value if value >= 0 else None


def _float32_as_float64(value: Any) -> float | None:
    return float(value)


def _float64_as_float32(value: Any) -> float | None:
    narrowed = to_float32(value)
    return narrowed if narrowed == value else None


# (left kind, right kind) -> conversion of the right value into the left kind.
# Each pairing is listed in both directions so equality stays symmetric.
_CONVERSIONS: dict[tuple[TermKind, TermKind], Callable[[Any], Any | None]] = {
    (TermKind.SIGNED_INTEGER, TermKind.UNSIGNED_INTEGER): _unsigned_as_signed,
    (TermKind.UNSIGNED_INTEGER, TermKind.SIGNED_INTEGER): _signed_as_unsigned,
    (TermKind.FLOAT64, TermKind.FLOAT32): _float32_as_float64,
    (TermKind.FLOAT32, TermKind.FLOAT64): _float64_as_float32,
}


def format_datetime(value: datetime, timespec: TimeSpec = "auto") -> str:
    """Render a timestamp as RFC 3339 text in UTC with a `Z` suffix."""
    return (
        value.astimezone(UTC)
        .isoformat(timespec=timespec)
        .replace("+00:00", "Z")
    )


@dataclass(frozen=True, slots=True, eq=False)
class Term:
    """A normalized scalar: at most one tagged value, or absent.

    Build instances through `Term.of` or the per-kind constructors, never
    with the raw dataclass constructor.

    Equality compares values, not representations: `Term.signed(16)` equals
    `Term.unsigned(16)` and `Term.float32(1.0)` equals `Term.float64(1.0)`.
    Across numeric kinds the right-hand value is converted into the
    left-hand kind and a lossy conversion compares unequal. Unrelated kinds
    never compare equal.

    Ordering puts absent first, then orders by kind rank
    (bool < string < integer < float < datetime) and by value inside a rank.
    A comparison involving `NaN` resolves to "left is less".
    """

    kind: TermKind | None = None
    value: TermScalar | None = None

    @classmethod
    def absent(cls) -> Self:
        """Create a Term holding no value."""
        return cls()

    @classmethod
    def boolean(cls, value: bool) -> Self:
        """Create a boolean Term."""
        return cls(TermKind.BOOL, bool(value))

    @classmethod
    def string(cls, value: str) -> Self:
        """Create a text Term."""
        return cls(TermKind.STRING, str(value))

    @classmethod
    def signed(cls, value: int) -> Self:
        """Create a signed 64-bit integer Term."""
        return cls(TermKind.SIGNED_INTEGER, wrap_signed(int(value)))

    @classmethod
    def unsigned(cls, value: int) -> Self:
        """Create an unsigned 64-bit integer Term."""
        return cls(TermKind.UNSIGNED_INTEGER, wrap_unsigned(int(value)))

    @classmethod
    def float32(cls, value: float) -> Self:
        """Create a 32-bit float Term."""
        return cls(TermKind.FLOAT32, to_float32(float(value)))

    @classmethod
    def float64(cls, value: float) -> Self:
        """Create a 64-bit float Term."""
        return cls(TermKind.FLOAT64, float(value))

    @classmethod
    def timestamp(cls, value: datetime) -> Self:
        """Create a timestamp Term, normalized to UTC. Naive values are taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return cls(TermKind.DATETIME, value.astimezone(UTC))

    @classmethod
    def of(cls, value: "TermLiteral | Term") -> "Term":
        """Wrap any supported literal.

        Ints become signed when they fit in 64 bits, unsigned when they only
        fit the unsigned range, and 64-bit floats beyond that.
        """
        match value:
            case None:
                return cls.absent()
            case Term():
                return value
            case bool():
                return cls.boolean(value)
            case str():
                return cls.string(value)
            case int():
                if I64_MIN <= value <= I64_MAX:
                    return cls.signed(value)
                if 0 <= value <= U64_MAX:
                    return cls.unsigned(value)
                try:
                    return cls.float64(float(value))
                except OverflowError:
                    return cls.float64(math.inf if value > 0 else -math.inf)
            case float():
                return cls.float64(value)
            case datetime():
                return cls.timestamp(value)
            case _:
                raise TypeError(
                    f"Unsupported term literal of type {type(value).__name__}"
                )

    @property
    def is_absent(self) -> bool:
        """True if the Term holds no value."""
        return self.kind is None

    def is_omittable(self) -> bool:
        """Absent terms and empty strings are left out of documents."""
        if self.kind is None:
            return True
        if self.kind is TermKind.STRING:
            return is_omittable(self.value)
        return False

    def to_json(self, timespec: TimeSpec = "auto") -> bool | str | int | float | None:
        """Return the plain JSON value of this Term."""
        if isinstance(self.value, datetime):
            return format_datetime(self.value, timespec)
        return self.value

    def _compare(self, other: "Term") -> int:
        if self.kind is None or other.kind is None:
            return (self.kind is not None) - (other.kind is not None)
        left_rank, right_rank = _KIND_RANK[self.kind], _KIND_RANK[other.kind]
        if left_rank != right_rank:
            return -1 if left_rank < right_rank else 1
        left: Any = self.value
        right: Any = other.value
        if left < right:
            return -1
        if left > right:
            return 1
        if left == right:
            return 0
        # NaN
        return -1

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        if self.kind is None or other.kind is None:
            return self.kind is other.kind
        if self.kind is other.kind:
            return self.value == other.value
        convert = _CONVERSIONS.get((self.kind, other.kind))
        if convert is None:
            return False
        converted = convert(other.value)
        return converted is not None and self.value == converted

    @override
    def __hash__(self) -> int:
        # Numeric kinds that may compare equal must hash alike
        if self.kind in _NUMERIC_KINDS:
            return hash(self.value)
        return hash((self.kind, self.value))

    def __lt__(self, other: "Term") -> bool:
        return self._compare(other) < 0

    def __le__(self, other: "Term") -> bool:
        return self._compare(other) <= 0

    def __gt__(self, other: "Term") -> bool:
        return self._compare(other) > 0

    def __ge__(self, other: "Term") -> bool:
        return self._compare(other) >= 0

    @override
    def __repr__(self) -> str:
        if self.kind is None:
            return "Term.absent()"
        return f"Term.{_CONSTRUCTOR_NAMES[self.kind]}({self.value!r})"
