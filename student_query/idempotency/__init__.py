"""
Idempotency package for the student query handler.

This module re-exports the store interfaces, the in-memory store and the gate
so downstream code can import from `student_query.idempotency` directly.
"""

from student_query.idempotency.abstract import AbstractIdempotencyStore, IdempotencyStore
from student_query.idempotency.gate import GateDecision, IdempotencyGate, resolve_idempotency_key
from student_query.idempotency.in_memory import InMemoryIdempotencyStore

__all__ = [
    # Abstracts
    "AbstractIdempotencyStore",
    "IdempotencyStore",
    # Concrete stores
    "InMemoryIdempotencyStore",
    # Gate
    "GateDecision",
    "IdempotencyGate",
    "resolve_idempotency_key",
]
