from __future__ import annotations

import json
from types import SimpleNamespace

from student_query.infrastructure import lambda_adapter
from student_query.infrastructure.lambda_adapter import (
    get_default_handler,
    handler,
    reset_default_handler,
    to_inbound_request,
)
from tests.factories import make_student


def _event(body, request_id="api-req-1"):
    event = {"body": body, "httpMethod": "POST", "path": "/students/query"}
    if request_id is not None:
        event["requestContext"] = {"requestId": request_id}
    return event


def test_to_inbound_request_reads_body_and_identifiers():
    context = SimpleNamespace(aws_request_id="lambda-1")

    request = to_inbound_request(_event('{"result": []}'), context)

    assert request.body == '{"result": []}'
    assert request.request_id == "api-req-1"
    assert request.invocation_id == "lambda-1"


def test_to_inbound_request_tolerates_sparse_events():
    request = to_inbound_request({})

    assert request.body is None
    assert request.request_id is None
    assert request.invocation_id is None


def test_default_handler_is_process_wide():
    assert get_default_handler() is get_default_handler()


def test_reset_default_handler_starts_fresh():
    first = get_default_handler()
    reset_default_handler()

    assert get_default_handler() is not first


def test_handler_runs_queries():
    body = json.dumps({"result": [make_student("A")]})

    response = handler(_event(body), SimpleNamespace(aws_request_id="lambda-1"))

    assert response["statusCode"] == 200
    assert json.loads(response["body"])["studentNames"] == ["A"]


def test_repeated_event_is_recognised_across_invocations():
    body = json.dumps({"result": [make_student("A")]})

    first = handler(_event(body), SimpleNamespace(aws_request_id="lambda-1"))
    second = handler(_event(body), SimpleNamespace(aws_request_id="lambda-2"))

    assert "studentNames" in json.loads(first["body"])
    assert json.loads(second["body"]) == {"message": "Request already processed"}


def test_context_request_id_is_the_fallback_key():
    body = json.dumps({"result": []})
    context = SimpleNamespace(aws_request_id="lambda-9")

    handler(_event(body, request_id=None), context)

    assert "lambda-9" in get_default_handler().store


def test_raw_event_is_logged_when_enabled(monkeypatch, caplog):
    monkeypatch.setenv("LOG_EVENTS", "true")
    lambda_adapter.get_settings.cache_clear()

    with caplog.at_level("DEBUG", logger="student_query.infrastructure.lambda_adapter"):
        handler(_event('{"result": []}'), SimpleNamespace(aws_request_id="lambda-1"))

    assert any("Inbound event" in r.getMessage() for r in caplog.records)


def _assert_internal_error(response):
    assert response["statusCode"] == 500
    assert response["headers"] == {"Content-Type": "application/json"}
    assert json.loads(response["body"])["error"] == "Internal server error"


def test_malformed_request_context_is_a_server_error():
    response = handler({"body": "{}", "requestContext": "not-a-mapping"})

    _assert_internal_error(response)


def test_unreadable_settings_are_a_server_error(monkeypatch):
    monkeypatch.setenv("LOG_EVENTS", "maybe")
    lambda_adapter.get_settings.cache_clear()

    response = handler(_event('{"result": []}'), SimpleNamespace(aws_request_id="lambda-1"))

    _assert_internal_error(response)
