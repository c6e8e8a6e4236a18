"""Request options and response models for the GenAI API."""

from .common import MAX_STOP_SEQUENCES, RequestOptions, Usage
from .images import (
    CreateImageOptions,
    EditImageOptions,
    ImageFormat,
    ImageSize,
    ImageType,
    ImageUploadOptions,
    ImageVariationOptions,
)
from .request import (
    ChatFunction,
    ChatMessage,
    ChatOptions,
    CompletionOptions,
    EditOptions,
    EmbeddingsOptions,
)
from .response import (
    ChatChoice,
    ChatCompletion,
    ChatResponseMessage,
    Completion,
    CompletionChoice,
    Edit,
    EditChoice,
    Embedding,
    Embeddings,
    ImageData,
    ImageResponse,
    Model,
    ModelList,
    ModelPermission,
    ResponseModel,
    decode_response,
)

__all__ = [
    # Common
    "MAX_STOP_SEQUENCES",
    "RequestOptions",
    "Usage",
    # Request
    "ChatFunction",
    "ChatMessage",
    "ChatOptions",
    "CompletionOptions",
    "EditOptions",
    "EmbeddingsOptions",
    # Images
    "CreateImageOptions",
    "EditImageOptions",
    "ImageFormat",
    "ImageSize",
    "ImageType",
    "ImageUploadOptions",
    "ImageVariationOptions",
    # Response
    "ChatChoice",
    "ChatCompletion",
    "ChatResponseMessage",
    "Completion",
    "CompletionChoice",
    "Edit",
    "EditChoice",
    "Embedding",
    "Embeddings",
    "ImageData",
    "ImageResponse",
    "Model",
    "ModelList",
    "ModelPermission",
    "ResponseModel",
    "decode_response",
]
