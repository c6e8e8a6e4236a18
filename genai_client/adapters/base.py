"""Encoded request bodies and the unset-field filter."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


def omit_unset(options: BaseModel) -> Dict[str, Any]:
    """
    Dump options to JSON-ready data, dropping their unset (``None``) fields.

    Only model fields are filtered, including those of nested option models
    such as messages and functions. Free-form mappings (function parameter
    schemas, ``function_call`` objects, logit bias) pass through unchanged.
    """
    payload = options.model_dump(mode="json")
    for name in type(options).model_fields:
        value = getattr(options, name)
        if value is None:
            payload.pop(name, None)
        elif isinstance(value, BaseModel):
            payload[name] = omit_unset(value)
        elif isinstance(value, (list, tuple)):
            payload[name] = [
                omit_unset(item) if isinstance(item, BaseModel) else dumped
                for item, dumped in zip(value, payload[name])
            ]
    return payload


@dataclass(frozen=True)
class FormPart:
    """One named part of a multipart/form-data body."""

    name: str
    value: Union[bytes, str]
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None

    def to_httpx(self) -> Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]:
        """Return the ``files=`` entry httpx expects for this part.

        Parts without a filename are rendered by httpx as plain form fields.
        """
        content = self.value.encode("utf-8") if isinstance(self.value, str) else self.value
        return self.name, (self.filename, content, self.content_type)


@dataclass(frozen=True)
class EncodedBody:
    """A request body plus its content type."""

    content_type: str
    json: Optional[Dict[str, Any]] = None
    parts: Tuple[FormPart, ...] = field(default_factory=tuple)

    @property
    def is_multipart(self) -> bool:
        return self.content_type == MULTIPART_CONTENT_TYPE

    def parts_named(self, name: str) -> List[FormPart]:
        return [part for part in self.parts if part.name == name]

    def request_kwargs(self) -> Dict[str, Any]:
        """Map the body onto httpx request keyword arguments.

        Multipart parts go through ``files=`` as an ordered list so that
        scalar fields keep their position after the image parts.
        """
        if self.is_multipart:
            return {"files": [part.to_httpx() for part in self.parts]}
        return {"json": self.json}
