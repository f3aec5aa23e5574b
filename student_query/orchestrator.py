"""
Request orchestrator: parse, validate, gate, query and respond.

Usage (example from a hosting adapter):
    from student_query.orchestrator import InboundRequest, RequestHandler

    handler = RequestHandler()
    response = handler.handle(InboundRequest(body='{"result": []}', request_id="req-1"))
    response["statusCode"]  # 200

Every path through `handle` produces a response; unexpected failures become a
500 response and are never raised to the caller.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict

from student_query.config import Settings, get_settings
from student_query.domain.validation import validate_payload
from student_query.idempotency.abstract import IdempotencyStore
from student_query.idempotency.gate import GateDecision, IdempotencyGate, resolve_idempotency_key
from student_query.idempotency.in_memory import InMemoryIdempotencyStore
from student_query.queries import run_queries
from student_query.utils.logging import get_logger
from student_query.utils.profiler import profile_block

log = get_logger(__name__)

JSON_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}


class HandlerResponse(TypedDict, total=False):
    """
    Transport-neutral response contract.

    `headers` is only present on responses that carry a JSON content type.
    """

    statusCode: int
    body: str
    headers: Dict[str, str]


@dataclass(frozen=True)
class InboundRequest:
    """
    What the orchestrator needs from the transport for one request.

    Attributes
    ----------
    body : str | None
        Raw body text; None is treated as an empty JSON object.
    request_id : str | None
        Per-request identifier, used as the idempotency key.
    invocation_id : str | None
        Per-invocation identifier of the hosting context, the key fallback.
    """

    body: Optional[str] = None
    request_id: Optional[str] = None
    invocation_id: Optional[str] = None


def _response(status: int, payload: Any, headers: Optional[Dict[str, str]] = None) -> HandlerResponse:
    response = HandlerResponse(statusCode=status, body=json.dumps(payload))
    if headers:
        response["headers"] = dict(headers)
    return response


def internal_error_response(exc: BaseException) -> HandlerResponse:
    """Build the 500 envelope reported for any unexpected failure."""
    return _response(
        500,
        {"error": "Internal server error", "message": str(exc)},
        headers=JSON_HEADERS,
    )


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


class RequestHandler:
    """
    Owns the idempotency gate and runs one request through every stage.

    Parameters
    ----------
    store : IdempotencyStore | None
        Store shared by all requests handled by this instance. Defaults to a
        fresh InMemoryIdempotencyStore.
    settings : Settings | None
        Defaults to the cached application settings.
    """

    def __init__(
        self,
        store: Optional[IdempotencyStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._gate = IdempotencyGate(store if store is not None else InMemoryIdempotencyStore())

    @property
    def store(self) -> IdempotencyStore:
        return self._gate.store

    def handle(self, request: InboundRequest) -> HandlerResponse:
        try:
            return self._process(request)
        except Exception as exc:  # noqa: BLE001 - every failure must become a response
            log.exception(
                "Unhandled error while processing request",
                extra={"request_id": request.request_id},
            )
            return internal_error_response(exc)

    def _process(self, request: InboundRequest) -> HandlerResponse:
        log.info(
            "Request received",
            extra={"request_id": request.request_id, "invocation_id": request.invocation_id},
        )

        try:
            payload = json.loads(request.body or "{}", parse_constant=_reject_constant)
        except ValueError as exc:
            log.error("Invalid JSON input", extra={"error": str(exc)})
            return _response(400, {"error": "Invalid JSON input"})

        validation = validate_payload(payload)
        if not validation.ok:
            log.error(
                "Invalid input",
                extra={"violations": len(validation.violations)},
            )
            details = [violation.model_dump() for violation in validation.violations]
            return _response(400, {"error": "Invalid input", "details": details})

        key = resolve_idempotency_key(request.request_id, request.invocation_id)
        if self._gate.check(key) is GateDecision.DUPLICATE:
            log.info(
                f"Idempotent request detected for key: {key}. Skipping processing.",
                extra={"idempotency_key": key},
            )
            return _response(200, {"message": "Request already processed"})
        log.info(
            f"Processing new request with idempotency key: {key}",
            extra={"idempotency_key": key, "records": len(validation.envelope.result)},
        )

        if self._settings.profile_queries:
            with profile_block("queries") as stats:
                results = run_queries(validation.envelope)
            log.info("All queries completed", extra=stats.as_log_fields())
        else:
            results = run_queries(validation.envelope)
            log.info("All queries completed")

        return _response(200, results, headers=JSON_HEADERS)


__all__ = [
    "HandlerResponse",
    "InboundRequest",
    "RequestHandler",
    "internal_error_response",
]
