"""
Idempotency gate: decides whether a request is processed or short-circuited.
"""

from __future__ import annotations

import enum
from typing import Optional

from student_query.errors import MissingIdempotencyKeyError
from student_query.idempotency.abstract import IdempotencyStore
from student_query.utils.logging import get_logger

log = get_logger(__name__)


class GateDecision(str, enum.Enum):
    ADMIT = "admit"
    DUPLICATE = "duplicate"


def resolve_idempotency_key(
    request_id: Optional[str],
    invocation_id: Optional[str] = None,
) -> str:
    """
    Pick the idempotency key for one request.

    The per-request identifier wins; the per-invocation identifier supplied by
    the hosting context is the fallback. Falling back is logged because every
    request sharing one invocation context then collides on the same key.

    Raises
    ------
    MissingIdempotencyKeyError
        If neither identifier is a non-empty string.
    """
    if request_id:
        return request_id
    if invocation_id:
        log.warning(
            "No request identifier supplied; falling back to invocation identifier",
            extra={"idempotency_key": invocation_id},
        )
        return invocation_id
    raise MissingIdempotencyKeyError("No request or invocation identifier to use as idempotency key")


class IdempotencyGate:
    """
    Admit-or-reject requests against an injected IdempotencyStore.
    """

    def __init__(self, store: IdempotencyStore) -> None:
        self._store = store

    @property
    def store(self) -> IdempotencyStore:
        return self._store

    def check(self, key: str) -> GateDecision:
        """
        Record `key` and admit the request, or report it as a duplicate.

        Raises
        ------
        ValueError
            If `key` is empty.
        """
        if not key:
            raise ValueError("Idempotency key must be a non-empty string")
        if self._store.add_if_absent(key):
            return GateDecision.ADMIT
        return GateDecision.DUPLICATE


__all__ = ["GateDecision", "IdempotencyGate", "resolve_idempotency_key"]
