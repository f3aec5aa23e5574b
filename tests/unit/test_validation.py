from __future__ import annotations

import pytest
from pydantic import ValidationError

from student_query.domain.models import RequestEnvelope, StudentRecord
from student_query.domain.validation import validate_payload
from tests.factories import make_student


def _codes_by_path(result) -> dict[tuple, str]:
    return {tuple(v.path): v.code for v in result.violations}


def test_valid_payload_yields_envelope_in_input_order(class_records):
    result = validate_payload({"result": class_records})

    assert result.ok
    assert result.violations == []
    assert isinstance(result.envelope, RequestEnvelope)
    assert [r.name for r in result.envelope.result] == ["Alice", "Bob", "Cara", "Dev", "Eli"]


def test_lowercase_field_names_are_accepted():
    payload = {
        "result": [
            {
                "name": "A",
                "subject": {"science": 50, "maths": 50, "result": "fail"},
                "attendance": 75,
            }
        ]
    }

    result = validate_payload(payload)

    assert result.ok
    record = result.envelope.result[0]
    assert record.subject.result == "fail"
    assert record.attendance == 75


def test_empty_result_list_is_valid():
    result = validate_payload({"result": []})

    assert result.ok
    assert result.envelope.result == []


def test_extra_keys_are_ignored():
    record = make_student()
    record["nickname"] = "Ace"

    assert validate_payload({"result": [record], "meta": {"page": 1}}).ok


@pytest.mark.parametrize("value", [0, 100, 0.0, 100.0, 55.5])
def test_bounds_are_inclusive(value):
    payload = {"result": [make_student(science=value, maths=value, attendance=value)]}

    assert validate_payload(payload).ok


def test_science_out_of_range_is_reported_with_its_path():
    result = validate_payload({"result": [make_student(name="B", science=150)]})

    assert not result.ok
    assert result.envelope is None
    [violation] = result.violations
    assert violation.path == ["result", 0, "Subject", "science"]
    assert violation.code == "out_of_range"
    assert "100" in violation.message


def test_every_violation_is_reported_not_just_the_first():
    payload = {
        "result": [
            make_student(science=-1, maths=101, result="maybe", attendance=200),
            make_student(name="ok"),
            make_student(maths=150),
        ]
    }

    result = validate_payload(payload)

    assert _codes_by_path(result) == {
        ("result", 0, "Subject", "science"): "out_of_range",
        ("result", 0, "Subject", "maths"): "out_of_range",
        ("result", 0, "Subject", "result"): "invalid_value",
        ("result", 0, "Attendance"): "out_of_range",
        ("result", 2, "Subject", "maths"): "out_of_range",
    }


def test_missing_fields_are_reported():
    payload = {"result": [{"name": "A", "Subject": {"science": 10, "result": "pass"}}]}

    result = validate_payload(payload)

    assert _codes_by_path(result) == {
        ("result", 0, "Subject", "maths"): "missing",
        ("result", 0, "Attendance"): "missing",
    }


def test_missing_result_key_is_reported():
    result = validate_payload({})

    assert [(v.path, v.code) for v in result.violations] == [(["result"], "missing")]


@pytest.mark.parametrize(
    "field, value",
    [
        ("science", "90"),
        ("science", True),
        ("maths", None),
        ("attendance", "40"),
        ("name", 7),
    ],
)
def test_wrong_types_are_type_mismatches(field, value):
    result = validate_payload({"result": [make_student(**{field: value})]})

    assert not result.ok
    assert [v.code for v in result.violations] == ["type_mismatch"]


@pytest.mark.parametrize("payload", [[], "text", 5, None, {"result": {"name": "A"}}])
def test_non_conforming_containers_are_type_mismatches(payload):
    result = validate_payload(payload)

    assert not result.ok
    assert all(v.code == "type_mismatch" for v in result.violations)


def test_result_token_is_case_sensitive():
    result = validate_payload({"result": [make_student(result="PASS")]})

    assert [v.code for v in result.violations] == ["invalid_value"]


def test_records_are_immutable():
    record = StudentRecord.model_validate(make_student())

    with pytest.raises(ValidationError):
        record.name = "changed"  # type: ignore[misc]


def test_numbers_keep_their_json_type():
    result = validate_payload({"result": [make_student(science=90, maths=72.5, attendance=40)]})

    record = result.envelope.result[0]
    assert type(record.subject.science) is int
    assert type(record.subject.maths) is float
    assert type(record.attendance) is int
