from __future__ import annotations

from threading import Lock

from starlette.requests import Request


class HitCounter:
    """Thread-safe, process-local count of file server hits (resets on restart).

    Each operation is a single critical section, so concurrent increments are
    never lost.
    """

    def __init__(self, initial: int = 0) -> None:
        self._lock = Lock()
        self._value = int(initial)

    def add(self, delta: int = 1) -> int:
        with self._lock:
            self._value += delta
            return self._value

    def load(self) -> int:
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        with self._lock:
            self._value = int(value)


def get_hit_counter(request: Request) -> HitCounter:
    """Dependency returning the counter owned by the running application."""

    return request.app.state.hit_counter
