"""
Schema validation for inbound request bodies.

`validate_payload` never raises for bad input: it returns a `ValidationResult`
holding either the validated `RequestEnvelope` or every violation pydantic
found in a single pass.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from student_query.domain.models import RequestEnvelope, Violation

_OUT_OF_RANGE = frozenset(
    {
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "finite_number",
    }
)
_INVALID_VALUE = frozenset({"literal_error", "enum"})


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one request body.

    Exactly one of `envelope` and `violations` is populated.
    """

    envelope: Optional[RequestEnvelope] = None
    violations: List[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.envelope is not None


def _classify(error_type: str) -> str:
    if error_type == "missing":
        return "missing"
    if error_type in _OUT_OF_RANGE:
        return "out_of_range"
    if error_type in _INVALID_VALUE:
        return "invalid_value"
    return "type_mismatch"


def _to_violation(error: Dict[str, Any]) -> Violation:
    return Violation(
        path=list(error.get("loc", ())),
        code=_classify(error["type"]),
        message=error["msg"],
    )


def validate_payload(payload: Any) -> ValidationResult:
    """
    Check a parsed JSON value against the request envelope schema.

    Parameters
    ----------
    payload : Any
        Result of `json.loads` on the request body.

    Returns
    -------
    ValidationResult
        The validated envelope, or a non-empty list of violations.
    """
    try:
        envelope = RequestEnvelope.model_validate(payload)
    except ValidationError as exc:
        violations = [_to_violation(err) for err in exc.errors(include_url=False)]
        return ValidationResult(violations=violations)
    return ValidationResult(envelope=envelope)


__all__ = ["ValidationResult", "validate_payload"]
