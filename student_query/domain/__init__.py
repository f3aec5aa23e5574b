"""
Domain package for the student query handler.

Exports the request models and the schema validator. Keep this package focused
on data definitions and validation concerns.
"""

from student_query.domain.models import (
    NameAndResult,
    QueryResultSet,
    RequestEnvelope,
    StudentRecord,
    Subject,
    Violation,
)
from student_query.domain.validation import ValidationResult, validate_payload

__all__ = [
    "NameAndResult",
    "QueryResultSet",
    "RequestEnvelope",
    "StudentRecord",
    "Subject",
    "Violation",
    "ValidationResult",
    "validate_payload",
]
