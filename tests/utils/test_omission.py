import pytest

from esdsl.params.term import Term
from esdsl.queries.query import constant_score, match_all, term
from esdsl.utils.omission import Omittable, compact, is_omittable


class AlwaysOmitted:
    def is_omittable(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, True),
        ("", True),
        ("text", False),
        ([], True),
        ([1], False),
        ((), True),
        ({}, True),
        ({"a": 1}, False),
        (set(), True),
        (0, False),
        (0.0, False),
        (False, False),
        (Term.absent(), True),
        (Term.signed(0), False),
        (AlwaysOmitted(), True),
    ],
)
def test_is_omittable(value: object, expected: bool) -> None:
    assert is_omittable(value) is expected


def test_protocol_is_runtime_checkable() -> None:
    assert isinstance(AlwaysOmitted(), Omittable)
    assert isinstance(Term.absent(), Omittable)
    assert isinstance(match_all(), Omittable)
    assert not isinstance("text", Omittable)


def test_queries_delegate() -> None:
    assert not is_omittable(match_all())
    assert is_omittable(term("field", ""))
    assert is_omittable(constant_score(term("field", None)))
    assert not is_omittable(constant_score(term("field", 0)))


def test_compact_drops_omittable_values() -> None:
    assert compact(
        [
            ("boost", None),
            ("_name", ""),
            ("value", 0),
            ("in_order", False),
            ("clauses", []),
            ("term", Term.string("x")),
        ]
    ) == {"value": 0, "in_order": False, "term": Term.string("x")}
