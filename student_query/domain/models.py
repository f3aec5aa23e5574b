"""
Domain models for the student query handler.

Defines the accepted shape of one student record and of the request envelope
that carries them, plus the violation and result contracts handed back to the
orchestrator. Wire names follow the payloads produced by the upstream grading
export (`Subject`, `Attendance`); the lowercase field names are accepted too.
"""
from __future__ import annotations

from typing import Annotated, Any, List, Literal, TypedDict, Union

from pydantic import BaseModel, Field, ValidatorFunctionWrapHandler, WrapValidator

ExamResult = Literal["pass", "fail"]
Number = Union[int, float]


def _keep_integers(value: Any, handler: ValidatorFunctionWrapHandler) -> Number:
    # Range and type checks run on the float schema; JSON integers stay integers.
    validated = handler(value)
    return value if type(value) is int else validated


Percentage = Annotated[float, Field(ge=0, le=100, strict=True), WrapValidator(_keep_integers)]


class Subject(BaseModel):
    """
    Marks and overall outcome for one student.
    """

    science: Percentage = Field(..., description="Science mark.")
    maths: Percentage = Field(..., description="Maths mark.")
    result: ExamResult = Field(..., description="Overall outcome, `pass` or `fail`.")

    model_config = {
        "frozen": True,
    }


class StudentRecord(BaseModel):
    """
    One entry of the `result` collection.
    """

    name: str = Field(..., strict=True, description="Student display name.")
    subject: Subject = Field(..., alias="Subject")
    attendance: Percentage = Field(..., alias="Attendance", description="Attendance percentage.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class RequestEnvelope(BaseModel):
    """
    Validated top-level payload. Record order is preserved in every query result.
    """

    result: List[StudentRecord] = Field(..., description="Student records, in input order.")

    model_config = {
        "frozen": True,
    }


class Violation(BaseModel):
    """
    A single schema non-conformance.

    `path` addresses the offending field as it appears on the wire, e.g.
    `["result", 0, "Subject", "science"]`; an empty path means the whole body.
    """

    path: List[Union[str, int]] = Field(default_factory=list)
    code: Literal["type_mismatch", "out_of_range", "invalid_value", "missing"]
    message: str


class NameAndResult(TypedDict):
    name: str
    result: ExamResult


class QueryResultSet(TypedDict):
    """
    Output of the query engine, keyed by query name.
    """

    studentNames: List[str]
    scienceMarks: List[Number]
    scienceAbove80: List[str]
    passedStudents: List[str]
    passedLowAttendance: List[str]
    perfectScore: List[str]
    nameAndResult: List[NameAndResult]


__all__ = [
    "ExamResult",
    "Number",
    "Percentage",
    "Subject",
    "StudentRecord",
    "RequestEnvelope",
    "Violation",
    "NameAndResult",
    "QueryResultSet",
]
