import pytest

from seqlcs.cancel import Cancelled, CancelToken
from seqlcs.table import build_table, final_cell
from tests.lcs_helpers import CancelAfter


def test_it_builds_the_length_table():
    assert build_table("ABC", "AC") == [
        [0, 0, 0],
        [0, 1, 1],
        [0, 1, 1],
        [0, 1, 2],
    ]


def test_it_builds_a_table_for_empty_inputs():
    assert build_table([], []) == [[0]]
    assert build_table([1, 2], []) == [[0], [0], [0]]
    assert build_table([], [1, 2]) == [[0, 0, 0]]


def test_the_table_never_decreases_along_either_axis():
    table = build_table("XMJYAUZ", "MZJAWXU")

    for row in table:
        assert row == sorted(row)
    for column in zip(*table):
        assert list(column) == sorted(column)

    assert final_cell(table) == 4


def test_it_uses_the_given_match_predicate():
    table = build_table(["A", "b"], ["a", "B"], equal=lambda a, b: a.lower() == b.lower())
    assert final_cell(table) == 2


def test_it_stops_before_the_first_column_when_cancelled(cancelled_token, counting_equal):
    with pytest.raises(Cancelled):
        build_table(range(100), range(100), counting_equal, cancelled_token)
    assert counting_equal.calls == 0


def test_it_finishes_the_current_column_before_stopping():
    token = CancelToken()
    equal = CancelAfter(token, 1)

    with pytest.raises(Cancelled):
        build_table([1, 2, 3], [4, 5, 6, 7], equal, token)
    assert equal.calls == 3
