from __future__ import annotations

"""Stream measurement, decoding and format classification for uploaded images."""
import io
import logging
from typing import BinaryIO, Optional

from PIL import Image

from ..models.check_result import ImageCheckResult

LOGGER = logging.getLogger(__name__)


class ImageCheckError(Exception):
    """Base for failures that the checker turns into result codes."""


class StreamReadError(ImageCheckError):
    pass


class InvalidImageError(ImageCheckError):
    pass


def measure_stream(stream: BinaryIO) -> int:
    """Rewind ``stream`` and return its length in bytes, leaving it at the start."""
    try:
        stream.seek(0, io.SEEK_END)
        length = stream.tell()
        stream.seek(0)
    except Exception as exc:
        raise StreamReadError(str(exc)) from exc
    return length


def read_stream(stream: BinaryIO) -> bytes:
    try:
        data = stream.read()
    except Exception as exc:
        raise StreamReadError(str(exc)) from exc
    if not isinstance(data, (bytes, bytearray)):
        raise StreamReadError(f"stream returned {type(data).__name__}, expected bytes")
    return bytes(data)


def decode_image(data: bytes) -> Image.Image:
    """Decode ``data`` fully so truncated or corrupt files fail here.

    The returned image is backed by its own buffer and does not depend on the
    stream the bytes were read from. The caller must close it.
    """
    try:
        image = Image.open(io.BytesIO(data))
    except Exception as exc:
        LOGGER.debug("Could not identify image: %s", exc)
        raise InvalidImageError(str(exc)) from exc

    try:
        image.load()
    except Exception as exc:
        image.close()
        LOGGER.debug("Could not decode %s image: %s", image.format, exc)
        raise InvalidImageError(str(exc)) from exc
    return image


def classify_format(image: Image.Image) -> Optional[ImageCheckResult]:
    return ImageCheckResult.from_format(image.format)
