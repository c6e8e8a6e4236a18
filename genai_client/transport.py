"""HTTP transport: one request in, one reply out."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .adapters.base import EncodedBody
from .config import settings
from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportReply:
    """Status and raw body of a successful reply."""

    status_code: int
    content: bytes
    headers: Dict[str, str] = field(default_factory=dict)


def _error_message(response: httpx.Response) -> str:
    """Pull the API's error message out of a failed reply."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error

    return response.text or response.reason_phrase


def create_async_client(request_timeout: Optional[float] = None) -> httpx.AsyncClient:
    """
    Create the async HTTP client used when the caller supplies none.

    Args:
        request_timeout: Request timeout in seconds, defaults to settings

    Returns:
        Configured httpx.AsyncClient instance
    """
    timeout = request_timeout if request_timeout is not None else settings.REQUEST_TIMEOUT
    return httpx.AsyncClient(timeout=timeout)


class HttpxTransport:
    """Sends single requests through an httpx.AsyncClient. Never retries."""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self._owns_client = http_client is None
        self._client = create_async_client() if http_client is None else http_client

    async def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[EncodedBody] = None,
    ) -> TransportReply:
        """
        Perform one HTTP exchange.

        Raises:
            TransportError: the connection failed or the status is not 2xx
        """
        kwargs = body.request_kwargs() if body is not None else {}

        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e!r}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise TransportError(message, status_code=response.status_code, body=response.content)

        return TransportReply(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
