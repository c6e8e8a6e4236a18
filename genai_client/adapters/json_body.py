"""JSON encoder for the text and embedding endpoints."""

import logging

from ..models.common import RequestOptions
from .base import JSON_CONTENT_TYPE, EncodedBody, omit_unset

logger = logging.getLogger(__name__)


def encode_json(options: RequestOptions) -> EncodedBody:
    """Encode options as a JSON object, leaving out every unset field."""
    payload = omit_unset(options)
    logger.debug(f"Encoded {type(options).__name__} as JSON with keys {sorted(payload)}")
    return EncodedBody(content_type=JSON_CONTENT_TYPE, json=payload)
