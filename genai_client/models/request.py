"""Request options for the text and embedding endpoints."""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field, field_validator

from .common import (
    LogitBias,
    NonEmptyStr,
    Penalty,
    RequestOptions,
    StopSequences,
    Temperature,
    TopP,
)


class ChatMessage(RequestOptions):
    """Chat message model."""

    role: Literal["system", "user", "assistant", "function"]
    content: str
    name: Optional[str] = None
    function_call: Optional[Dict[str, Any]] = None


class ChatFunction(RequestOptions):
    """Function the model may call."""

    name: NonEmptyStr
    description: Optional[str] = None
    parameters: Dict[str, Any]


def _as_prompt_list(v: Any) -> Any:
    """Accept a bare string where the API takes a list of strings."""
    if isinstance(v, str):
        return [v]
    return v


class ChatOptions(RequestOptions):
    """Options for ``POST /chat/completions``."""

    model: NonEmptyStr
    messages: List[ChatMessage] = Field(min_length=1)
    functions: Optional[List[ChatFunction]] = None
    function_call: Optional[Union[Literal["none", "auto"], Dict[str, str]]] = None
    temperature: Optional[Temperature] = None
    top_p: Optional[TopP] = None
    n: Optional[int] = Field(default=None, ge=1)
    stream: Optional[bool] = None
    stop: Optional[StopSequences] = None
    max_tokens: Optional[int] = Field(default=None, ge=1)
    presence_penalty: Optional[Penalty] = None
    frequency_penalty: Optional[Penalty] = None
    logit_bias: Optional[LogitBias] = None
    user: Optional[str] = None

    @classmethod
    def default(
        cls,
        model: str,
        messages: List[Union[ChatMessage, Dict[str, Any]]],
        max_tokens: Optional[int] = None,
    ) -> "ChatOptions":
        """Build chat options with the API's documented defaults."""
        return cls(
            model=model,
            messages=messages,
            temperature=1.0,
            top_p=1.0,
            n=1,
            stream=False,
            max_tokens=max_tokens,
            presence_penalty=0,
            frequency_penalty=0,
        )


class CompletionOptions(RequestOptions):
    """Options for ``POST /completions``."""

    model: NonEmptyStr
    prompt: List[NonEmptyStr] = Field(min_length=1)
    suffix: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[Temperature] = None
    top_p: Optional[TopP] = None
    n: Optional[int] = Field(default=None, ge=1)
    stream: Optional[bool] = None
    logprobs: Optional[int] = Field(default=None, ge=0, le=5)
    echo: Optional[bool] = None
    stop: Optional[StopSequences] = None
    presence_penalty: Optional[Penalty] = None
    frequency_penalty: Optional[Penalty] = None
    best_of: Optional[int] = Field(default=None, ge=1)
    logit_bias: Optional[LogitBias] = None
    user: Optional[str] = None

    @field_validator("prompt", mode="before")
    @classmethod
    def normalize_prompt(cls, v: Any) -> Any:
        """Wrap a single prompt string in a list."""
        return _as_prompt_list(v)

    @classmethod
    def default(cls, model: str, prompt: Union[str, List[str]]) -> "CompletionOptions":
        """Build completion options with the API's documented defaults."""
        return cls(
            model=model,
            prompt=prompt,
            max_tokens=16,
            temperature=1.0,
            top_p=1.0,
            n=1,
            stream=False,
            echo=False,
            presence_penalty=0,
            frequency_penalty=0,
            best_of=1,
        )


class EditOptions(RequestOptions):
    """Options for ``POST /edits``."""

    model: NonEmptyStr
    input: Optional[str] = None
    instruction: NonEmptyStr
    n: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[Temperature] = None
    top_p: Optional[TopP] = None

    @classmethod
    def default(
        cls, model: str, instruction: str, input: Optional[str] = None
    ) -> "EditOptions":
        """Build edit options with the API's documented defaults."""
        return cls(
            model=model,
            input=input,
            instruction=instruction,
            n=1,
            temperature=1.0,
            top_p=1.0,
        )


class EmbeddingsOptions(RequestOptions):
    """Options for ``POST /embeddings``."""

    model: NonEmptyStr
    input: List[NonEmptyStr] = Field(min_length=1)
    user: Optional[str] = None

    @field_validator("input", mode="before")
    @classmethod
    def normalize_input(cls, v: Any) -> Any:
        return _as_prompt_list(v)

    @classmethod
    def default(cls, model: str, input: Union[str, List[str]]) -> "EmbeddingsOptions":
        """Build embeddings options; the endpoint has no extra defaults."""
        return cls(model=model, input=input)
