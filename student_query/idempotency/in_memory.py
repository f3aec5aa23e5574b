"""
Process-local idempotency store backed by a set.

Keys are never evicted: the set grows for the lifetime of the process. This is
a known limitation of the in-memory store, not a defect. Swap in another
IdempotencyStore implementation when a bound or persistence is required.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Set

from student_query.idempotency.abstract import AbstractIdempotencyStore


class InMemoryIdempotencyStore(AbstractIdempotencyStore):
    """
    Thread-safe set of seen idempotency keys.

    The hosting environment may run several handler invocations in parallel
    threads of one process, so membership test and insert share one lock.
    """

    name: str = "in_memory"

    def __init__(self, keys: Optional[Iterable[str]] = None) -> None:
        self._keys: Set[str] = set(keys or ())
        self._lock = threading.Lock()

    def add_if_absent(self, key: str) -> bool:
        with self._lock:
            if key in self._keys:
                return False
            self._keys.add(key)
            return True

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)


__all__ = ["InMemoryIdempotencyStore"]
