from __future__ import annotations

import logging
from typing import Any, Sequence

from seqlcs.cancel import CancelToken
from seqlcs.equality import Equal, deep_equal

log = logging.getLogger(__name__)


def compute_length(
    left: Sequence[Any],
    right: Sequence[Any],
    equal: Equal = deep_equal,
    cancel: CancelToken | None = None,
) -> int:
    """
    LCS length in O(min(m, n)) memory.

    Only a single row of the table is kept. The shorter sequence is used as
    the inner dimension; the swap is local, so the caller's sequences are
    untouched.
    """
    if len(right) > len(left):
        left, right = right, left

    m, n = len(left), len(right)

    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        if cancel is not None:
            err = cancel.error()
            if err is not None:
                log.debug(f"compute_length: cancelled at row {i} of {m}")
                raise err

        a = left[i - 1]
        # curr[j - 1] of the previous row, before it is overwritten
        diagonal = 0
        for j in range(1, n + 1):
            above = curr[j]
            if equal(a, right[j - 1]):
                curr[j] = diagonal + 1
            elif curr[j - 1] > above:
                curr[j] = curr[j - 1]
            diagonal = above

    log.debug(f"compute_length: {m}x{n} -> {curr[n]}")
    return curr[n]
