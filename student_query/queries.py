"""
Query engine: the fixed battery of projections evaluated for every request.

Each query is a plain filter/map/project over the validated record sequence and
always preserves input order.

Usage:
    from student_query.queries import run_queries

    results = run_queries(envelope)
    results["passedStudents"]
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from student_query.domain.models import (
    NameAndResult,
    Number,
    QueryResultSet,
    RequestEnvelope,
    StudentRecord,
)
from student_query.errors import UnknownQueryError

Query = Callable[[Sequence[StudentRecord]], List[Any]]
Predicate = Callable[[StudentRecord], bool]

SCIENCE_HONOURS_THRESHOLD = 80
LOW_ATTENDANCE_THRESHOLD = 50
PERFECT_MARK = 100


def _names_where(records: Sequence[StudentRecord], predicate: Predicate) -> List[str]:
    return [record.name for record in records if predicate(record)]


def _passed(record: StudentRecord) -> bool:
    return record.subject.result == "pass"


def student_names(records: Sequence[StudentRecord]) -> List[str]:
    return [record.name for record in records]


def science_marks(records: Sequence[StudentRecord]) -> List[Number]:
    return [record.subject.science for record in records]


def science_above_80(records: Sequence[StudentRecord]) -> List[str]:
    return _names_where(records, lambda r: r.subject.science > SCIENCE_HONOURS_THRESHOLD)


def passed_students(records: Sequence[StudentRecord]) -> List[str]:
    return _names_where(records, _passed)


def passed_low_attendance(records: Sequence[StudentRecord]) -> List[str]:
    return _names_where(
        records, lambda r: _passed(r) and r.attendance < LOW_ATTENDANCE_THRESHOLD
    )


def perfect_score(records: Sequence[StudentRecord]) -> List[str]:
    return _names_where(
        records,
        lambda r: r.subject.science == PERFECT_MARK or r.subject.maths == PERFECT_MARK,
    )


def name_and_result(records: Sequence[StudentRecord]) -> List[NameAndResult]:
    return [NameAndResult(name=record.name, result=record.subject.result) for record in records]


def _query_registry() -> Dict[str, Query]:
    """Registry of available queries, in output order."""
    return {
        "studentNames": student_names,
        "scienceMarks": science_marks,
        "scienceAbove80": science_above_80,
        "passedStudents": passed_students,
        "passedLowAttendance": passed_low_attendance,
        "perfectScore": perfect_score,
        "nameAndResult": name_and_result,
    }


def available_queries() -> List[str]:
    """List available query names in output order."""
    return list(_query_registry().keys())


def run_query(name: str, envelope: RequestEnvelope) -> List[Any]:
    """
    Evaluate a single named query.

    Raises
    ------
    UnknownQueryError
        If `name` is not a registered query.
    """
    registry = _query_registry()
    if name not in registry:
        raise UnknownQueryError(f"Unknown query '{name}'. Available: {', '.join(registry)}")
    return registry[name](envelope.result)


def run_queries(envelope: RequestEnvelope) -> QueryResultSet:
    """
    Evaluate every registered query against the validated envelope.

    Parameters
    ----------
    envelope : RequestEnvelope
        Validated request body.

    Returns
    -------
    QueryResultSet
        One entry per query; empty lists when the envelope holds no records.
    """
    records = envelope.result
    results = {name: query(records) for name, query in _query_registry().items()}
    return QueryResultSet(**results)  # type: ignore[typeddict-item]


__all__ = [
    "available_queries",
    "run_query",
    "run_queries",
]
