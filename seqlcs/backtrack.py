from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, cast

from seqlcs.equality import Equal, deep_equal


@dataclass(frozen=True)
class IndexPair:
    left: int
    right: int


def backtrack(
    table: Sequence[Sequence[int]],
    left: Sequence[Any],
    right: Sequence[Any],
    equal: Equal = deep_equal,
) -> list[IndexPair]:
    """
    Recover the matched index pairs from a completed table.

    The walk goes from the bottom-right corner towards the origin, and each
    match is stored at its rank ``table[x][y] - 1``, so the result comes out
    in ascending order. On a tie the walk steps along ``left`` first.
    """
    x, y = len(left), len(right)
    pairs: list[IndexPair | None] = [None] * table[x][y]

    while x > 0 and y > 0:
        if equal(left[x - 1], right[y - 1]):
            pairs[table[x][y] - 1] = IndexPair(left=x - 1, right=y - 1)
            x -= 1
            y -= 1
        elif table[x - 1][y] >= table[x][y - 1]:
            x -= 1
        else:
            y -= 1

    return cast(list[IndexPair], pairs)
