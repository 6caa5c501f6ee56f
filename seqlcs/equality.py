from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeAlias

log = logging.getLogger(__name__)

Equal: TypeAlias = Callable[[Any, Any], bool]


def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality between two elements.

    Containers are compared recursively and values of different types never
    match, so ``1`` and ``1.0`` or ``[1]`` and ``(1,)`` are distinct. Any
    other value falls back to ``==``. Containers that refer back to
    themselves are handled by remembering the pairs already under
    comparison. The predicate never raises: a comparison that fails is
    reported as a mismatch.
    """
    try:
        return _deep_equal(a, b)
    except Exception as e:
        log.debug(f"deep_equal: comparing {type(a).__name__} values failed: {e!r}")
        return False


def _deep_equal(a: Any, b: Any) -> bool:
    # explicit stack so nesting depth is not bounded by the recursion limit
    pending: list[tuple[Any, Any]] = [(a, b)]
    visited: set[tuple[int, int]] = set()

    while pending:
        a, b = pending.pop()

        if a is b:
            continue

        if type(a) is not type(b):
            return False

        if isinstance(a, (list, tuple, Mapping)):
            key = (id(a), id(b))
            if key in visited:
                continue
            visited.add(key)

            if isinstance(a, Mapping):
                if a.keys() != b.keys():
                    return False
                pending.extend((value, b[k]) for k, value in a.items())
            else:
                if len(a) != len(b):
                    return False
                pending.extend(zip(a, b))
        elif not bool(a == b):
            return False

    return True
