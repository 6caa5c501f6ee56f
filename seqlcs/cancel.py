from __future__ import annotations

import logging
import threading
import time

log = logging.getLogger(__name__)


class Cancelled(Exception):
    def __init__(self, message: str = "operation cancelled", cause: object = None):
        super().__init__(message)
        self.cause = cause


class DeadlineExceeded(Cancelled):
    def __init__(self, deadline: float):
        super().__init__("deadline exceeded", cause=deadline)
        self.deadline = deadline


class CancelToken:
    """
    Cooperative cancellation signal.

    Long-running operations poll a token at a fixed granularity and raise
    once it has been cancelled or its deadline (a ``time.monotonic()``
    value) has passed. A token created with a parent is also cancelled
    whenever the parent is.
    """

    def __init__(
        self,
        deadline: float | None = None,
        parent: CancelToken | None = None,
    ) -> None:
        self.parent: CancelToken | None = parent
        self.deadline: float | None = self._earliest(deadline, parent)
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._cause: object = None

    @classmethod
    def with_timeout(cls, seconds: float) -> CancelToken:
        return cls(deadline=time.monotonic() + seconds)

    def child(self, timeout: float | None = None) -> CancelToken:
        deadline = None if timeout is None else time.monotonic() + timeout
        return CancelToken(deadline=deadline, parent=self)

    def cancel(self, cause: object = None) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._cause = cause
            self._event.set()
        log.debug(f"token cancelled (cause={cause!r})")

    @property
    def cancelled(self) -> bool:
        return self.error() is not None

    def error(self) -> Cancelled | None:
        if self._event.is_set():
            return Cancelled(cause=self._cause)

        if self.parent is not None:
            err = self.parent.error()
            if err is not None:
                return err

        if self.deadline is not None and time.monotonic() >= self.deadline:
            return DeadlineExceeded(self.deadline)

        return None

    def raise_if_cancelled(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    @staticmethod
    def _earliest(
        deadline: float | None, parent: CancelToken | None
    ) -> float | None:
        inherited = parent.deadline if parent is not None else None
        if deadline is None:
            return inherited
        if inherited is None:
            return deadline
        return min(deadline, inherited)
