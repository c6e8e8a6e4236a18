"""Async client for the GenAI HTTP API."""

import logging
import uuid
from typing import Dict, Optional, Type
from urllib.parse import quote

import httpx

from .adapters import EncodedBody, encode_json, encode_multipart
from .config import settings
from .errors import ValidationError
from .models import (
    ChatCompletion,
    ChatOptions,
    Completion,
    CompletionOptions,
    CreateImageOptions,
    Edit,
    EditImageOptions,
    EditOptions,
    Embeddings,
    EmbeddingsOptions,
    ImageResponse,
    ImageVariationOptions,
    Model,
    ModelList,
    decode_response,
)
from .models.response import ResponseT
from .transport import HttpxTransport
from .utils.debug_logger import log_incoming_reply, log_outgoing_request

logger = logging.getLogger(__name__)


class GenAIClient:
    """
    Typed client for the chat, completion, embedding and image endpoints.

    Each call is a single round trip: encode options, send with a bearer
    token, decode the reply. Transport and decode errors propagate unchanged.

    Usage:
        async with GenAIClient(api_key, "https://api.openai.com/v1") as client:
            completion = await client.create_chat_completion(
                ChatOptions.default("gpt-3.5-turbo", messages, max_tokens=20)
            )
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise ValidationError("api_key must not be empty")
        if not base_url:
            raise ValidationError("base_url must not be empty")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._transport = HttpxTransport(http_client)

    @classmethod
    def from_env(cls, http_client: Optional[httpx.AsyncClient] = None) -> "GenAIClient":
        """Build a client from GENAI_API_KEY and GENAI_BASE_URL."""
        api_key = settings.get_api_key()
        if not api_key:
            raise ValidationError("GENAI_API_KEY is not set")
        return cls(api_key, settings.BASE_URL, http_client=http_client)

    async def __aenter__(self) -> "GenAIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def _call(
        self,
        method: str,
        path: str,
        response_cls: Type[ResponseT],
        body: Optional[EncodedBody] = None,
    ) -> ResponseT:
        """Send one request and decode its reply."""
        request_id = uuid.uuid4().hex[:12]
        url = f"{self.base_url}{path}"
        headers = self._headers()

        logger.debug(f"[{request_id}] {method} {url}")
        log_outgoing_request(request_id, method, url, headers, body)

        reply = await self._transport.send(method, url, headers, body)
        log_incoming_reply(request_id, reply.status_code, reply.content)

        return decode_response(response_cls, reply.content)

    # Models

    async def list_models(self) -> ModelList:
        """List the models available to this API key."""
        return await self._call("GET", "/models", ModelList)

    async def get_model(self, model_id: str) -> Model:
        """Fetch a single model by id."""
        if not model_id:
            raise ValidationError("model_id must not be empty")
        return await self._call("GET", f"/models/{quote(model_id, safe='')}", Model)

    # Text

    async def create_chat_completion(self, opts: ChatOptions) -> ChatCompletion:
        """Create a chat completion."""
        return await self._call("POST", "/chat/completions", ChatCompletion, encode_json(opts))

    async def create_completion(self, opts: CompletionOptions) -> Completion:
        """Create a text completion."""
        return await self._call("POST", "/completions", Completion, encode_json(opts))

    async def create_edit(self, opts: EditOptions) -> Edit:
        """Create an edit of the given input."""
        return await self._call("POST", "/edits", Edit, encode_json(opts))

    async def create_embeddings(self, opts: EmbeddingsOptions) -> Embeddings:
        """Create embeddings for the given input."""
        return await self._call("POST", "/embeddings", Embeddings, encode_json(opts))

    # Images

    async def create_image(self, opts: CreateImageOptions) -> ImageResponse:
        """Generate images from a prompt."""
        return await self._call(
            "POST", "/images/generations", ImageResponse, encode_json(opts)
        )

    async def edit_image(self, opts: EditImageOptions) -> ImageResponse:
        """Edit an uploaded PNG, optionally restricted by a mask."""
        return await self._call(
            "POST", "/images/edits", ImageResponse, encode_multipart(opts)
        )

    async def create_image_variation(self, opts: ImageVariationOptions) -> ImageResponse:
        """Create variations of an uploaded PNG."""
        return await self._call(
            "POST", "/images/variations", ImageResponse, encode_multipart(opts)
        )
