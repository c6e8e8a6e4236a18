"""Debug logging utility for request/reply payload inspection."""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ..adapters.base import EncodedBody
from ..config import settings

logger = logging.getLogger("genai_client.payloads")

SENSITIVE_HEADERS = ("authorization", "x-api-key")


def _truncate(text: str, max_length: int = 0) -> str:
    """Truncate text if max_length is set."""
    if max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length] + f"... [truncated, total {len(text)} chars]"


def _safe_json(obj: Any, indent: int = 2) -> str:
    """Safely serialize object to JSON string."""
    try:
        return json.dumps(obj, ensure_ascii=False, indent=indent, default=str)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Replace credential headers with a placeholder."""
    return {k: ("***" if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}


def describe_body(body: EncodedBody) -> Any:
    """Loggable view of a body; binary parts are summarized by size."""
    if not body.is_multipart:
        return body.json
    return [
        {
            "name": part.name,
            "filename": part.filename,
            "content_type": part.content_type,
            "value": f"<{len(part.value)} bytes>" if part.is_file else part.value,
        }
        for part in body.parts
    ]


def log_outgoing_request(
    request_id: str,
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[EncodedBody] = None,
) -> None:
    """Log a request about to be sent upstream."""
    if not settings.DEBUG_LOG_PAYLOADS:
        return

    timestamp = datetime.now().isoformat()
    max_len = settings.DEBUG_LOG_MAX_LENGTH

    log_parts = [
        f"\n{'>'*60}",
        f"[{timestamp}] OUTGOING REQUEST: {request_id}",
        f"{'>'*60}",
        f"Method: {method}",
        f"URL: {url}",
    ]

    if headers:
        log_parts.append(f"Headers: {_safe_json(mask_headers(headers))}")

    if body is not None:
        log_parts.append(f"Content-Type: {body.content_type}")
        log_parts.append(f"Body:\n{_truncate(_safe_json(describe_body(body)), max_len)}")

    log_parts.append(">" * 60)
    logger.info("\n".join(log_parts))


def log_incoming_reply(
    request_id: str,
    status_code: int,
    content: Optional[bytes] = None,
) -> None:
    """Log a reply received from upstream."""
    if not settings.DEBUG_LOG_PAYLOADS:
        return

    timestamp = datetime.now().isoformat()
    max_len = settings.DEBUG_LOG_MAX_LENGTH

    log_parts = [
        f"\n{'<'*60}",
        f"[{timestamp}] INCOMING REPLY: {request_id}",
        f"{'<'*60}",
        f"Status: {status_code}",
    ]

    if content:
        text = content.decode("utf-8", errors="replace")
        log_parts.append(f"Body:\n{_truncate(text, max_len)}")

    log_parts.append("<" * 60)
    logger.info("\n".join(log_parts))
