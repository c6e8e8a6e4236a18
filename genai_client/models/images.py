"""Image sizes, formats and request options for the image endpoints."""

from enum import Enum
from typing import Annotated, Optional

from pydantic import Field

from .common import NonEmptyStr, RequestOptions


class ImageSize(str, Enum):
    """Square output sizes accepted by the image endpoints."""

    SIZE_256 = "256x256"
    SIZE_512 = "512x512"
    SIZE_1024 = "1024x1024"

    def __str__(self) -> str:
        return self.value


class ImageFormat(str, Enum):
    """How generated images are returned."""

    URL = "url"
    B64_JSON = "b64_json"

    def __str__(self) -> str:
        return self.value


class ImageType(str, Enum):
    """MIME type of uploaded images. The API only takes PNG."""

    PNG = "image/png"

    def __str__(self) -> str:
        return self.value


ImageCount = Annotated[int, Field(ge=1, le=10)]


class CreateImageOptions(RequestOptions):
    """Options for ``POST /images/generations``."""

    prompt: NonEmptyStr
    n: Optional[ImageCount] = None
    size: Optional[ImageSize] = None
    response_format: Optional[ImageFormat] = None
    user: Optional[str] = None

    @classmethod
    def default(cls, prompt: str) -> "CreateImageOptions":
        """Build generation options with the API's documented defaults."""
        return cls(
            prompt=prompt,
            n=1,
            size=ImageSize.SIZE_256,
            response_format=ImageFormat.URL,
        )


class ImageUploadOptions(RequestOptions):
    """Fields shared by the endpoints that take an uploaded image."""

    file_name: NonEmptyStr
    image: bytes = Field(min_length=1, repr=False)
    image_type: ImageType = ImageType.PNG
    n: Optional[ImageCount] = None
    size: Optional[ImageSize] = None
    response_format: Optional[ImageFormat] = None
    user: Optional[str] = None


class EditImageOptions(ImageUploadOptions):
    """Options for ``POST /images/edits``."""

    prompt: NonEmptyStr
    mask: Optional[bytes] = Field(default=None, min_length=1, repr=False)
    mask_file_name: Optional[str] = None

    @classmethod
    def default(
        cls,
        file_name: str,
        image: bytes,
        prompt: str,
        image_type: ImageType = ImageType.PNG,
    ) -> "EditImageOptions":
        """Build image edit options with the API's documented defaults."""
        return cls(
            file_name=file_name,
            image=image,
            image_type=image_type,
            prompt=prompt,
            n=1,
            size=ImageSize.SIZE_256,
            response_format=ImageFormat.URL,
        )


class ImageVariationOptions(ImageUploadOptions):
    """Options for ``POST /images/variations``."""

    @classmethod
    def default(
        cls,
        file_name: str,
        image: bytes,
        image_type: ImageType = ImageType.PNG,
    ) -> "ImageVariationOptions":
        """Build image variation options with the API's documented defaults."""
        return cls(
            file_name=file_name,
            image=image,
            image_type=image_type,
            n=1,
            size=ImageSize.SIZE_256,
            response_format=ImageFormat.URL,
        )
