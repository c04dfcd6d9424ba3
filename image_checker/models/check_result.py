from __future__ import annotations

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .constraints import SizeConstraints


class ImageCheckResult(IntEnum):
    GIF_IMAGE = 0
    JPEG_IMAGE = 1
    PNG_IMAGE = 2
    # Reserved, no detection produces it.
    FLASH_MOVIE = 3
    UNSUPPORTED_FORMAT = 4
    STREAM_READ_ERROR = 5
    DATA_SIZE_TOO_HIGH = 6
    INVALID_IMAGE = 7
    IMAGE_IS_EMPTY = 8
    SIZE_MISMATCH = 9
    WIDTH_MISMATCH = 10
    WIDTH_TOO_HIGH = 11
    WIDTH_TOO_LOW = 12
    HEIGHT_MISMATCH = 13
    HEIGHT_TOO_HIGH = 14
    HEIGHT_TOO_LOW = 15

    @property
    def is_success(self) -> bool:
        return self in _SUCCESS_RESULTS

    @property
    def message_key(self) -> str:
        return f"image_check_result.{self.name.lower()}"

    @classmethod
    def from_format(cls, image_format: Optional[str]) -> Optional["ImageCheckResult"]:
        """Map a Pillow format tag to its success code, ``None`` if not accepted."""
        if not image_format:
            return None
        return _FORMAT_RESULTS.get(image_format.upper())


_SUCCESS_RESULTS = frozenset(
    {ImageCheckResult.GIF_IMAGE, ImageCheckResult.JPEG_IMAGE, ImageCheckResult.PNG_IMAGE}
)

# MPO is how Pillow reports multi-picture JPEGs written by cameras.
_FORMAT_RESULTS = {
    "JPEG": ImageCheckResult.JPEG_IMAGE,
    "MPO": ImageCheckResult.JPEG_IMAGE,
    "GIF": ImageCheckResult.GIF_IMAGE,
    "PNG": ImageCheckResult.PNG_IMAGE,
}


class ImageCheckReport(BaseModel):
    """Outcome of one check together with the measurements that produced it."""

    model_config = ConfigDict(frozen=True)

    result: ImageCheckResult
    data_size: int = 0
    width: int = 0
    height: int = 0
    elapsed_ms: float = Field(default=-1.0, description="-1 unless the check succeeded.")
    constraints: SizeConstraints = Field(default_factory=SizeConstraints)

    @property
    def ok(self) -> bool:
        return self.result.is_success
