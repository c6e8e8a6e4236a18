"""Exception types raised by the client."""

from typing import Any, List, Optional


class GenAIError(Exception):
    """Base class for every error raised by genai_client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GenAIError, ValueError):
    """Request options are malformed or incomplete.

    Raised while building options, before anything is sent.
    """

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class TransportError(GenAIError):
    """The HTTP exchange failed or the API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class DecodeError(GenAIError):
    """The reply body does not match the expected response schema."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []
