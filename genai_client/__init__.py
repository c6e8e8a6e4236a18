"""Typed async client for the GenAI chat, completion, embedding and image API."""

__version__ = "0.1.0"

from .client import GenAIClient
from .errors import DecodeError, GenAIError, TransportError, ValidationError
from .models import (
    ChatCompletion,
    ChatFunction,
    ChatMessage,
    ChatOptions,
    Completion,
    CompletionOptions,
    CreateImageOptions,
    Edit,
    EditImageOptions,
    EditOptions,
    Embeddings,
    EmbeddingsOptions,
    ImageData,
    ImageFormat,
    ImageResponse,
    ImageSize,
    ImageType,
    ImageVariationOptions,
    Model,
    ModelList,
    ModelPermission,
    Usage,
)

__all__ = [
    "GenAIClient",
    # Errors
    "DecodeError",
    "GenAIError",
    "TransportError",
    "ValidationError",
    # Options
    "ChatFunction",
    "ChatMessage",
    "ChatOptions",
    "CompletionOptions",
    "CreateImageOptions",
    "EditImageOptions",
    "EditOptions",
    "EmbeddingsOptions",
    "ImageFormat",
    "ImageSize",
    "ImageType",
    "ImageVariationOptions",
    # Responses
    "ChatCompletion",
    "Completion",
    "Edit",
    "Embeddings",
    "ImageData",
    "ImageResponse",
    "Model",
    "ModelList",
    "ModelPermission",
    "Usage",
]
