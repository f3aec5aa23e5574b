"""
Student Query Handler - validated, idempotent queries over student records.

This package accepts a JSON body describing a list of student records and
returns the results of a fixed battery of queries over them:

- Schema validation with a full violation list
- Idempotency gating on a per-request key
- Seven filter/map/project queries (names, marks, passes, attendance...)
- A request orchestrator mapping every failure mode to a response

Hosting adapters (an AWS Lambda style handler) and a CLI wrap the orchestrator.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from student_query.config import Settings, get_settings
from student_query.domain import (
    RequestEnvelope,
    StudentRecord,
    ValidationResult,
    Violation,
    validate_payload,
)
from student_query.idempotency import (
    GateDecision,
    IdempotencyGate,
    IdempotencyStore,
    InMemoryIdempotencyStore,
)
from student_query.orchestrator import HandlerResponse, InboundRequest, RequestHandler
from student_query.queries import available_queries, run_queries
from student_query.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "RequestEnvelope",
    "StudentRecord",
    "ValidationResult",
    "Violation",
    "validate_payload",
    # Idempotency
    "GateDecision",
    "IdempotencyGate",
    "IdempotencyStore",
    "InMemoryIdempotencyStore",
    # Orchestration
    "HandlerResponse",
    "InboundRequest",
    "RequestHandler",
    "available_queries",
    "run_queries",
    # Logging
    "configure_logging",
    "get_logger",
]
