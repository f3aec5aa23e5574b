"""
Abstract store interfaces for idempotency tracking.

Concrete stores (the in-memory set today, a bounded or externally backed store
later) implement the IdempotencyStore protocol so the gate and the orchestrator
never depend on a particular storage choice.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdempotencyStore(Protocol):
    """
    Common interface every idempotency store must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier used in logs.
    """

    name: str

    def add_if_absent(self, key: str) -> bool:
        """
        Record `key` unless it is already present.

        Parameters
        ----------
        key : str
            Idempotency key of the request being admitted.

        Returns
        -------
        bool
            True if the key was newly recorded, False if it was already present.
            The check and the insert happen as one atomic step.
        """
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def __len__(self) -> int:
        ...


class AbstractIdempotencyStore(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and implement `add_if_absent`, `__contains__`
    and `__len__`.
    """

    name: str

    @abc.abstractmethod
    def add_if_absent(self, key: str) -> bool:  # pragma: no cover - interface only
        """Atomically record the key; report whether it was new."""
        raise NotImplementedError

    @abc.abstractmethod
    def __contains__(self, key: object) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def __len__(self) -> int:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = [
    "IdempotencyStore",
    "AbstractIdempotencyStore",
]
