"""Typed reply envelopes for every endpoint."""

import base64
import json
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import DecodeError
from .common import Usage
from .images import ImageFormat

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound="ResponseModel")


class ResponseModel(BaseModel):
    """Base for reply models. Keys the API adds later are ignored."""

    model_config = ConfigDict(extra="ignore")


# =============================================================================
# Models
# =============================================================================


class ModelPermission(ResponseModel):
    """Permission record attached to a model."""

    id: str
    object: str
    created: int
    allow_create_engine: bool
    allow_sampling: bool
    allow_logprobs: bool
    allow_search_indices: bool
    allow_view: bool
    allow_fine_tuning: bool
    organization: str
    group: Optional[Any] = None
    is_blocking: bool


class Model(ResponseModel):
    """Model information."""

    id: str
    object: str
    created: int
    owned_by: str
    permission: List[ModelPermission] = []
    root: Optional[str] = None
    parent: Optional[Any] = None


class ModelList(ResponseModel):
    """Model list response."""

    object: str
    data: List[Model]


# =============================================================================
# Chat and text completions
# =============================================================================


class ChatResponseMessage(ResponseModel):
    """Message returned in a chat choice."""

    role: str
    # Null when the model answers with a function call.
    content: Optional[str] = None
    function_call: Optional[Dict[str, Any]] = None


class ChatChoice(ResponseModel):
    """Chat completion choice."""

    index: int
    message: ChatResponseMessage
    finish_reason: Optional[str] = None


class ChatCompletion(ResponseModel):
    """Reply of ``POST /chat/completions``."""

    id: str
    object: str
    created: int
    model: str
    choices: List[ChatChoice]
    usage: Usage


class CompletionChoice(ResponseModel):
    """Text completion choice."""

    text: str
    index: int
    logprobs: Optional[Any] = None
    finish_reason: Optional[str] = None


class Completion(ResponseModel):
    """Reply of ``POST /completions``."""

    id: str
    object: str
    created: int
    model: str
    choices: List[CompletionChoice]
    usage: Usage


class EditChoice(ResponseModel):
    """Edited text."""

    text: str
    index: int


class Edit(ResponseModel):
    """Reply of ``POST /edits``."""

    object: str
    created: int
    choices: List[EditChoice]
    usage: Usage


# =============================================================================
# Embeddings
# =============================================================================


class Embedding(ResponseModel):
    """One embedding vector."""

    object: str
    embedding: List[float]
    index: int


class Embeddings(ResponseModel):
    """Reply of ``POST /embeddings``."""

    object: str
    data: List[Embedding]
    model: str
    usage: Usage


# =============================================================================
# Images
# =============================================================================


class ImageData(ResponseModel):
    """One generated image, either a URL or base64-encoded PNG data.

    The wire shape is ``{"url": ...}`` or ``{"b64_json": ...}`` depending on
    the requested ``response_format``. ``kind`` records which one arrived and
    ``data`` holds the string as returned.
    """

    kind: ImageFormat
    data: str
    revised_prompt: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def tag_image_payload(cls, v: Any) -> Any:
        """Turn the wire key into the ``kind`` tag."""
        if not isinstance(v, dict) or "kind" in v:
            return v

        present = [fmt for fmt in ImageFormat if v.get(fmt.value) is not None]
        if len(present) != 1:
            raise ValueError("image data must carry exactly one of 'url' or 'b64_json'")

        kind = present[0]
        tagged = {"kind": kind, "data": v[kind.value]}
        if v.get("revised_prompt") is not None:
            tagged["revised_prompt"] = v["revised_prompt"]
        return tagged

    @model_serializer
    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to the reply shape."""
        wire: Dict[str, Any] = {self.kind.value: self.data}
        if self.revised_prompt is not None:
            wire["revised_prompt"] = self.revised_prompt
        return wire

    @property
    def url(self) -> Optional[str]:
        return self.data if self.kind is ImageFormat.URL else None

    @property
    def b64_json(self) -> Optional[str]:
        return self.data if self.kind is ImageFormat.B64_JSON else None

    def decode_bytes(self) -> bytes:
        """Decode base64 image data. URL results have nothing to decode."""
        if self.kind is not ImageFormat.B64_JSON:
            raise ValueError("image was returned as a URL, not base64 data")
        return base64.b64decode(self.data)


class ImageResponse(ResponseModel):
    """Reply of the image endpoints. Images carry no token usage."""

    created: int
    data: List[ImageData]


# =============================================================================
# Decoding
# =============================================================================


def decode_response(response_cls: Type[ResponseT], content: bytes) -> ResponseT:
    """
    Decode a raw reply body into the endpoint's response model.

    Raises:
        DecodeError: the body is not JSON or does not match the schema
    """
    try:
        payload = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Reply for {response_cls.__name__} is not valid JSON: {e}")
        raise DecodeError(f"Reply is not valid JSON: {e}") from e

    try:
        return response_cls.model_validate(payload)
    except PydanticValidationError as e:
        logger.warning(f"Reply does not match {response_cls.__name__}: {e.error_count()} errors")
        raise DecodeError(
            f"Reply does not match {response_cls.__name__}: {e}",
            errors=e.errors(),
        ) from e
