"""Utility modules."""

from .debug_logger import (
    describe_body,
    log_incoming_reply,
    log_outgoing_request,
    mask_headers,
)

__all__ = [
    "describe_body",
    "log_incoming_reply",
    "log_outgoing_request",
    "mask_headers",
]
