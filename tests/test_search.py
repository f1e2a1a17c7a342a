import pytest
from utils.general import assert_serialize  # pyright:ignore[reportImplicitRelativeImport]

from esdsl.queries.query import bool_, match_all, term
from esdsl.search import Search


def test_empty_search() -> None:
    assert Search().to_dict() == {}
    assert Search().to_json() == b"{}"


def test_search_body() -> None:
    search = (
        Search()
        .query(match_all().boost(2))
        .from_(20)
        .size(10)
        .track_total_hits(True)
        .min_score(0.5)
    )

    assert_serialize(
        search,
        {
            "query": {"match_all": {"boost": 2}},
            "from": 20,
            "size": 10,
            "track_total_hits": True,
            "min_score": 0.5,
        },
    )


def test_search_keeps_zero_values() -> None:
    assert Search().from_(0).size(0).track_total_hits(False).to_dict() == {
        "from": 0,
        "size": 0,
        "track_total_hits": False,
    }


def test_search_leaves_out_omittable_query() -> None:
    assert Search().query(bool_().must(term("a", ""))).size(5).to_dict() == {
        "size": 5
    }


def test_search_rejects_non_query() -> None:
    with pytest.raises(TypeError):
        Search().query({"match_all": {}})  # pyright:ignore[reportArgumentType]
