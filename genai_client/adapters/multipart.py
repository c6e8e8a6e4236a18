"""multipart/form-data encoder for the image upload endpoints."""

import logging
from typing import List, Optional

from ..models.images import EditImageOptions, ImageUploadOptions
from .base import MULTIPART_CONTENT_TYPE, EncodedBody, FormPart

logger = logging.getLogger(__name__)

DEFAULT_MASK_FILE_NAME = "mask.png"


def _text_part(name: str, value: Optional[object]) -> Optional[FormPart]:
    """Scalar part holding the canonical string form of ``value``."""
    if value is None:
        return None
    return FormPart(name=name, value=str(value))


def encode_multipart(options: ImageUploadOptions) -> EncodedBody:
    """
    Encode image upload options as ordered multipart parts.

    Order: ``image``, ``mask`` (edits only, if set), ``prompt`` (edits only),
    then ``n``, ``size``, ``response_format`` and ``user`` when set. Only the
    binary parts carry a filename and MIME type.
    """
    mime_type = options.image_type.value
    parts: List[FormPart] = [
        FormPart(
            name="image",
            value=options.image,
            filename=options.file_name,
            content_type=mime_type,
        )
    ]

    scalars: List[Optional[FormPart]] = []
    if isinstance(options, EditImageOptions):
        if options.mask is not None:
            parts.append(
                FormPart(
                    name="mask",
                    value=options.mask,
                    filename=options.mask_file_name or DEFAULT_MASK_FILE_NAME,
                    content_type=mime_type,
                )
            )
        scalars.append(_text_part("prompt", options.prompt))

    scalars.extend(
        [
            _text_part("n", options.n),
            _text_part("size", options.size),
            _text_part("response_format", options.response_format),
            _text_part("user", options.user),
        ]
    )
    parts.extend(part for part in scalars if part is not None)

    logger.debug(
        f"Encoded {type(options).__name__} as multipart: "
        f"{[part.name for part in parts]} ({len(options.image)} image bytes)"
    )
    return EncodedBody(content_type=MULTIPART_CONTENT_TYPE, parts=tuple(parts))
