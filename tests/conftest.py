"""
Pytest configuration for the student query handler.

Provides fixtures for:
- Settings override for tests
- Sample student records and request bodies
- A fresh RequestHandler per test
"""

from __future__ import annotations

import json
from typing import Any, Callable, Generator

import pytest

from student_query.config import Settings, get_settings
from student_query.infrastructure.lambda_adapter import reset_default_handler
from student_query.orchestrator import InboundRequest, RequestHandler
from tests.factories import make_student


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(log_level="DEBUG", profile_queries=True)


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Generator[None, None, None]:
    """
    Start every test with fresh cached settings and no process-wide handler.
    """
    get_settings.cache_clear()
    reset_default_handler()
    yield
    get_settings.cache_clear()
    reset_default_handler()


@pytest.fixture
def student() -> Callable[..., dict[str, Any]]:
    return make_student


@pytest.fixture
def class_records() -> list[dict[str, Any]]:
    """
    A small class covering every query: honours, perfect marks, failures and
    low attendance.
    """
    return [
        make_student("Alice", science=95, maths=100, result="pass", attendance=90),
        make_student("Bob", science=80, maths=55, result="pass", attendance=30),
        make_student("Cara", science=100, maths=20, result="fail", attendance=45),
        make_student("Dev", science=40, maths=35, result="fail", attendance=10),
        make_student("Eli", science=81, maths=70, result="pass", attendance=49.5),
    ]


@pytest.fixture
def handler(test_settings: Settings) -> RequestHandler:
    return RequestHandler(settings=test_settings)


@pytest.fixture
def make_request() -> Callable[..., InboundRequest]:
    """
    Build an InboundRequest from a Python payload (serialized to JSON) or raw text.
    """

    def _make(
        payload: Any = None,
        *,
        raw: str | None = None,
        request_id: str | None = "req-1",
        invocation_id: str | None = None,
    ) -> InboundRequest:
        body = raw if raw is not None else (json.dumps(payload) if payload is not None else None)
        return InboundRequest(body=body, request_id=request_id, invocation_id=invocation_id)

    return _make
