"""Encoders turning request options into transport bodies."""

from .base import (
    JSON_CONTENT_TYPE,
    MULTIPART_CONTENT_TYPE,
    EncodedBody,
    FormPart,
    omit_unset,
)
from .json_body import encode_json
from .multipart import encode_multipart

__all__ = [
    "JSON_CONTENT_TYPE",
    "MULTIPART_CONTENT_TYPE",
    "EncodedBody",
    "FormPart",
    "encode_json",
    "encode_multipart",
    "omit_unset",
]
