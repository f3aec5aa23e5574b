"""
AWS Lambda style entry point for the student query handler.

Translates an API Gateway proxy event into an InboundRequest and hands it to a
process-wide RequestHandler. The handler (and so the idempotency store it owns)
is created lazily on first use and lives for the life of the process, which is
what lets a warm container recognise a repeated request.

Deployment points the function handler at
`student_query.infrastructure.lambda_adapter.handler`.
"""

from __future__ import annotations

import json
import threading
from typing import Any, Mapping, Optional

from student_query.config import get_settings
from student_query.orchestrator import (
    HandlerResponse,
    InboundRequest,
    RequestHandler,
    internal_error_response,
)
from student_query.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

_default_handler: Optional[RequestHandler] = None
_lock = threading.Lock()


def get_default_handler() -> RequestHandler:
    """
    Get or create the process-wide RequestHandler.

    Logging is configured once, alongside the handler creation, without
    replacing handlers the hosting runtime installed.
    """
    global _default_handler
    with _lock:
        if _default_handler is None:
            settings = get_settings()
            configure_logging(level=settings.log_level, json_logs=settings.log_json, force=False)
            _default_handler = RequestHandler(settings=settings)
        return _default_handler


def reset_default_handler() -> None:
    """Drop the process-wide handler so the next call starts with an empty store."""
    global _default_handler
    with _lock:
        _default_handler = None


def to_inbound_request(event: Mapping[str, Any], context: Any = None) -> InboundRequest:
    """
    Extract body and identifiers from a proxy event and the invocation context.
    """
    request_context = event.get("requestContext") or {}
    return InboundRequest(
        body=event.get("body"),
        request_id=request_context.get("requestId"),
        invocation_id=getattr(context, "aws_request_id", None),
    )


def handler(event: Mapping[str, Any], context: Any = None) -> HandlerResponse:
    """
    Lambda function handler.

    Parameters
    ----------
    event : Mapping
        API Gateway proxy event; only `body` and `requestContext.requestId` are read.
    context : Any
        Lambda context object; `aws_request_id` is the idempotency key fallback.

    Failures before the orchestrator takes over (settings, event shape) are
    reported with the same 500 envelope the orchestrator uses.
    """
    try:
        request_handler = get_default_handler()
        if get_settings().log_events:
            log.debug("Inbound event: %s", json.dumps(event, indent=2, default=str))
        request = to_inbound_request(event, context)
    except Exception as exc:  # noqa: BLE001 - the transport must always get a response
        log.exception("Unable to prepare request from event")
        return internal_error_response(exc)
    return request_handler.handle(request)


__all__ = [
    "get_default_handler",
    "handler",
    "reset_default_handler",
    "to_inbound_request",
]
