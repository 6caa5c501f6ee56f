from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from seqlcs.backtrack import IndexPair, backtrack
from seqlcs.cancel import CancelToken
from seqlcs.equality import Equal, deep_equal
from seqlcs.length import compute_length
from seqlcs.table import FrozenTable, build_table, final_cell, freeze

log = logging.getLogger(__name__)

T = TypeVar("T")


class Uncomputed:
    def __repr__(self) -> str:
        return "Uncomputed"


UNCOMPUTED = Uncomputed()


@dataclass(frozen=True)
class Computed(Generic[T]):
    value: T


Cached = Uncomputed | Computed[T]


class LCS:
    """
    Longest common subsequence calculator for a pair of sequences.

    Every operation takes an optional ``CancelToken``. Without one the call
    always succeeds; with one it may raise ``Cancelled``. Results are
    computed at most once per instance: a successful call fills its cache,
    a cancelled call leaves the caches as they were so a retry starts over.
    Cached results are tuples, so callers cannot alter them. The caches are
    guarded by a lock, so an instance can be shared between threads.
    """

    def __init__(
        self,
        left: Sequence[Any],
        right: Sequence[Any],
        equal: Equal = deep_equal,
    ) -> None:
        self._left: tuple[Any, ...] = tuple(left)
        self._right: tuple[Any, ...] = tuple(right)
        self.equal: Equal = equal

        self._lock = threading.RLock()
        self._table: Cached[FrozenTable] = UNCOMPUTED
        self._length: Cached[int] = UNCOMPUTED
        self._index_pairs: Cached[tuple[IndexPair, ...]] = UNCOMPUTED
        self._values: Cached[tuple[Any, ...]] = UNCOMPUTED

    def __repr__(self) -> str:
        return f"LCS(left={list(self._left)!r}, right={list(self._right)!r})"

    @property
    def left(self) -> tuple[Any, ...]:
        return self._left

    @property
    def right(self) -> tuple[Any, ...]:
        return self._right

    def table(self, cancel: CancelToken | None = None) -> FrozenTable:
        with self._lock:
            if isinstance(self._table, Computed):
                return self._table.value

            table = freeze(build_table(self._left, self._right, self.equal, cancel))
            self._table = Computed(table)
            return table

    def length(self, cancel: CancelToken | None = None) -> int:
        with self._lock:
            if isinstance(self._length, Computed):
                return self._length.value

            if isinstance(self._table, Computed):
                length = final_cell(self._table.value)
            else:
                length = compute_length(self._left, self._right, self.equal, cancel)

            self._length = Computed(length)
            return length

    def index_pairs(self, cancel: CancelToken | None = None) -> tuple[IndexPair, ...]:
        with self._lock:
            if isinstance(self._index_pairs, Computed):
                return self._index_pairs.value

            table = self.table(cancel)
            pairs = tuple(backtrack(table, self._left, self._right, self.equal))
            log.debug(f"index_pairs: found {len(pairs)} matched pairs")

            self._index_pairs = Computed(pairs)
            return pairs

    def values(self, cancel: CancelToken | None = None) -> tuple[Any, ...]:
        with self._lock:
            if isinstance(self._values, Computed):
                return self._values.value

            pairs = self.index_pairs(cancel)
            values = tuple(self._left[pair.left] for pair in pairs)

            self._values = Computed(values)
            return values


def lcs_length(left: Sequence[Any], right: Sequence[Any]) -> int:
    return LCS(left, right).length()


def lcs_index_pairs(left: Sequence[Any], right: Sequence[Any]) -> list[IndexPair]:
    return list(LCS(left, right).index_pairs())


def lcs_values(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    return list(LCS(left, right).values())
