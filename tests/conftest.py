"""Pytest configuration and fixtures for client tests."""

import base64
import json
from typing import Any, AsyncGenerator, Callable, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from genai_client import GenAIClient

API_KEY = "sk-test-key"
BASE_URL = "https://api.test/v1"

# Small 1x1 PNG images for testing
RED_PIXEL_PNG = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="
BLUE_PIXEL_PNG = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPj/HwADBwIAMCbHYQAAAABJRU5ErkJggg=="


class RecordingHandler:
    """MockTransport handler that records requests and replays one reply."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest_asyncio.fixture
async def mock_api() -> AsyncGenerator[Callable[..., Tuple[GenAIClient, RecordingHandler]], None]:
    """Factory building a client whose HTTP traffic goes to a RecordingHandler."""
    http_clients: List[httpx.AsyncClient] = []

    def _make(**reply: Any) -> Tuple[GenAIClient, RecordingHandler]:
        handler = RecordingHandler(**reply)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return GenAIClient(API_KEY, BASE_URL, http_client=http_client), handler

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def red_png() -> bytes:
    """Raw bytes of a 1x1 red PNG."""
    return base64.b64decode(RED_PIXEL_PNG)


@pytest.fixture
def blue_png() -> bytes:
    """Raw bytes of a 1x1 blue PNG."""
    return base64.b64decode(BLUE_PIXEL_PNG)


@pytest.fixture
def usage_reply() -> dict:
    return {"prompt_tokens": 13, "completion_tokens": 7, "total_tokens": 20}


@pytest.fixture
def chat_reply(usage_reply: dict) -> dict:
    """Chat completion reply."""
    return {
        "id": "chatcmpl-abc123",
        "object": "chat.completion",
        "created": 1686000000,
        "model": "gpt-3.5-turbo-0613",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello! How can I help?"},
                "finish_reason": "stop",
            }
        ],
        "usage": usage_reply,
    }


@pytest.fixture
def completion_reply(usage_reply: dict) -> dict:
    """Text completion reply."""
    return {
        "id": "cmpl-abc123",
        "object": "text_completion",
        "created": 1686000000,
        "model": "text-davinci-003",
        "choices": [
            {"text": "\n\nGood luck!", "index": 0, "logprobs": None, "finish_reason": "length"}
        ],
        "usage": usage_reply,
    }


@pytest.fixture
def edit_reply(usage_reply: dict) -> dict:
    """Edit reply."""
    return {
        "object": "edit",
        "created": 1686000000,
        "choices": [{"text": "What day of the week is it?", "index": 0}],
        "usage": usage_reply,
    }


@pytest.fixture
def embeddings_reply() -> dict:
    """Embeddings reply; usage carries no completion tokens."""
    return {
        "object": "list",
        "data": [
            {"object": "embedding", "embedding": [0.0023, -0.0093, 0.0157], "index": 0},
            {"object": "embedding", "embedding": [0.0101, 0.0042, -0.0311], "index": 1},
        ],
        "model": "text-embedding-ada-002",
        "usage": {"prompt_tokens": 8, "total_tokens": 8},
    }


@pytest.fixture
def image_url_reply() -> dict:
    """Image reply with URL results."""
    return {
        "created": 1686000000,
        "data": [
            {"url": "https://images.test/one.png"},
            {"url": "https://images.test/two.png"},
        ],
    }


@pytest.fixture
def image_b64_reply() -> dict:
    """Image reply with base64 results."""
    return {"created": 1686000000, "data": [{"b64_json": RED_PIXEL_PNG}]}


def _model_record(model_id: str, owner: str) -> dict:
    return {
        "id": model_id,
        "object": "model",
        "created": 1649358449,
        "owned_by": owner,
        "permission": [
            {
                "id": f"modelperm-{model_id}",
                "object": "model_permission",
                "created": 1669085501,
                "allow_create_engine": False,
                "allow_sampling": True,
                "allow_logprobs": True,
                "allow_search_indices": False,
                "allow_view": True,
                "allow_fine_tuning": False,
                "organization": "*",
                "group": None,
                "is_blocking": False,
            }
        ],
        "root": model_id,
        "parent": None,
    }


@pytest.fixture
def model_reply() -> dict:
    """Single model record."""
    return _model_record("text-davinci-003", "openai-internal")


@pytest.fixture
def models_reply() -> dict:
    """Model list reply with two records."""
    return {
        "object": "list",
        "data": [
            _model_record("babbage", "openai"),
            _model_record("gpt-3.5-turbo", "openai"),
        ],
    }
