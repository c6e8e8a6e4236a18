"""Types shared by request options and responses."""

import copy
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

# The upstream API accepts at most four stop sequences.
MAX_STOP_SEQUENCES = 4

NonEmptyStr = Annotated[str, Field(min_length=1)]

StopSequences = Union[
    NonEmptyStr,
    Annotated[List[NonEmptyStr], Field(min_length=1, max_length=MAX_STOP_SEQUENCES)],
]

Temperature = Annotated[float, Field(ge=0, le=2)]
TopP = Annotated[float, Field(ge=0, le=1)]
Penalty = Annotated[float, Field(ge=-2, le=2)]
LogitBias = dict[str, Annotated[int, Field(ge=-100, le=100)]]


def _describe(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into a single readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<options>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return f"Invalid {exc.title}: " + "; ".join(parts)


class RequestOptions(BaseModel):
    """Base for per-endpoint request options.

    Fields left as ``None`` are unset and never reach the wire. Construction
    errors are raised as :class:`genai_client.errors.ValidationError`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise ValidationError(_describe(exc), errors=exc.errors()) from exc

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False):
        """Return a copy with ``update`` applied, validated like a new instance."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        if deep:
            data = copy.deepcopy(data)
        data.update(update or {})
        return type(self)(**{k: v for k, v in data.items() if v is not None})


class Usage(BaseModel):
    """Token usage statistics."""

    prompt_tokens: int
    # Embeddings replies only report prompt and total tokens.
    completion_tokens: int = 0
    total_tokens: int
