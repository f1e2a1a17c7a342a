from enum import StrEnum


class ZeroTermsQuery(StrEnum):
    """Whether documents are returned when the analyzer removes every token.

    This happens, for instance, when a `stop` filter drops the whole input.
    """

    NONE = "none"
    """No documents are returned."""

    ALL = "all"
    """Every document is returned, like a `match_all` query."""


class Operator(StrEnum):
    """Boolean logic used to combine the analyzed terms of a full-text query."""

    OR = "or"
    AND = "and"
