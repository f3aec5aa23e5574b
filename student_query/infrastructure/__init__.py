"""
Hosting adapters for the student query handler.

Each adapter converts a transport-specific event into an InboundRequest and
returns the orchestrator's response in the transport's shape.
"""

from student_query.infrastructure.lambda_adapter import (
    get_default_handler,
    handler,
    reset_default_handler,
    to_inbound_request,
)

__all__ = [
    "get_default_handler",
    "handler",
    "reset_default_handler",
    "to_inbound_request",
]
