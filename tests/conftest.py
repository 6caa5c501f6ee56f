from typing import Any, Callable, Sequence, TypeAlias

import pytest

from seqlcs.cancel import CancelToken
from seqlcs.equality import deep_equal
from tests.lcs_helpers import CountingEqual

IsSubsequence: TypeAlias = Callable[[Sequence[Any], Sequence[Any]], bool]


@pytest.fixture
def counting_equal() -> CountingEqual:
    return CountingEqual()


@pytest.fixture
def cancelled_token() -> CancelToken:
    token = CancelToken()
    token.cancel("requested")
    return token


@pytest.fixture
def is_subsequence() -> IsSubsequence:
    def _is_subsequence(sub: Sequence[Any], seq: Sequence[Any]) -> bool:
        it = iter(seq)
        return all(any(deep_equal(x, y) for y in it) for x in sub)

    return _is_subsequence
