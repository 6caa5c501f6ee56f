from __future__ import annotations

import logging
from typing import Any, Sequence, TypeAlias

from seqlcs.cancel import CancelToken
from seqlcs.equality import Equal, deep_equal

log = logging.getLogger(__name__)

Table: TypeAlias = list[list[int]]
FrozenTable: TypeAlias = tuple[tuple[int, ...], ...]


def build_table(
    left: Sequence[Any],
    right: Sequence[Any],
    equal: Equal = deep_equal,
    cancel: CancelToken | None = None,
) -> Table:
    """
    Build the ``(len(left)+1) x (len(right)+1)`` LCS length table.

    ``table[x][y]`` is the LCS length of ``left[:x]`` and ``right[:y]``.
    The token is polled before each column; a cancelled build raises and
    the partial table is dropped.
    """
    size_x = len(left) + 1
    size_y = len(right) + 1

    table: Table = [[0] * size_y for _ in range(size_x)]

    for y in range(1, size_y):
        if cancel is not None:
            err = cancel.error()
            if err is not None:
                log.debug(f"build_table: cancelled at column {y} of {size_y - 1}")
                raise err

        r = right[y - 1]
        for x in range(1, size_x):
            if equal(left[x - 1], r):
                table[x][y] = table[x - 1][y - 1] + 1
            else:
                table[x][y] = max(table[x - 1][y], table[x][y - 1])

    log.debug(f"build_table: built {size_x}x{size_y} table")
    return table


def freeze(table: Table) -> FrozenTable:
    return tuple(tuple(row) for row in table)


def final_cell(table: Sequence[Sequence[int]]) -> int:
    return table[-1][-1]
