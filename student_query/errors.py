"""
Exception types raised by the student query handler.

Schema violations and duplicate requests are not exceptions: validation returns
a result object and the idempotency gate returns a decision. The types below
cover the defects the orchestrator maps to a 500 response.
"""

from __future__ import annotations


class StudentQueryError(Exception):
    """Base class for errors raised by this package."""


class MissingIdempotencyKeyError(StudentQueryError):
    """Neither a request identifier nor an invocation identifier was supplied."""


class UnknownQueryError(StudentQueryError, KeyError):
    """A query name was requested that is not registered with the engine."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


__all__ = [
    "StudentQueryError",
    "MissingIdempotencyKeyError",
    "UnknownQueryError",
]
