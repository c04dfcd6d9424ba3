from __future__ import annotations

"""Checks that uploaded streams hold valid images within configured bounds."""
import io
import logging
import time
from typing import TYPE_CHECKING, BinaryIO, Optional, Tuple

from PIL import Image

from ..i18n import Translator
from ..models.check_result import ImageCheckReport, ImageCheckResult
from ..models.constraints import SizeConstraints
from .constraints import evaluate_size_constraints
from .decoder import InvalidImageError, StreamReadError, classify_format, decode_image, measure_stream, read_stream
from .messages import format_check_message

if TYPE_CHECKING:
    from ..config import Settings

LOGGER = logging.getLogger(__name__)


def _constraint_property(name: str, doc: str) -> property:
    def getter(self: "ImageChecker") -> int:
        return getattr(self._constraints, name)

    def setter(self: "ImageChecker", value: int) -> None:
        self._constraints = SizeConstraints(**{**self._constraints.model_dump(), name: value})

    return property(getter, setter, doc=doc)


class ImageChecker:
    """Validates image streams and remembers the measurements of the last check.

    The configuration persists across calls. The last-run accessors
    (``data_size``, ``width``, ``height``, ``elapsed_ms``) and
    :meth:`format_error_message` are overwritten by every check, so an
    instance must not be shared between concurrent checks. Use
    :meth:`inspect` with :func:`format_check_message` when the report has to
    travel on its own.
    """

    max_data_size = _constraint_property("max_data_size", "Maximum stream length in bytes, 0 for any.")
    max_width = _constraint_property("max_width", "Maximum width in pixels, 0 for any.")
    max_height = _constraint_property("max_height", "Maximum height in pixels, 0 for any.")
    min_width = _constraint_property("min_width", "Minimum width in pixels, 0 for any.")
    min_height = _constraint_property("min_height", "Minimum height in pixels, 0 for any.")

    def __init__(
        self,
        constraints: Optional[SizeConstraints] = None,
        *,
        translator: Optional[Translator] = None,
        locale: Optional[str] = None,
    ) -> None:
        self._constraints = constraints or SizeConstraints()
        self._translator = translator or Translator()
        self._locale = locale
        self._last_report: Optional[ImageCheckReport] = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ImageChecker":
        return cls(settings.constraints(), translator=Translator(default_locale=settings.locale))

    @property
    def constraints(self) -> SizeConstraints:
        return self._constraints

    @property
    def last_report(self) -> Optional[ImageCheckReport]:
        return self._last_report

    @property
    def data_size(self) -> int:
        return self._last_report.data_size if self._last_report else 0

    @property
    def width(self) -> int:
        return self._last_report.width if self._last_report else 0

    @property
    def height(self) -> int:
        return self._last_report.height if self._last_report else 0

    @property
    def elapsed_ms(self) -> float:
        return self._last_report.elapsed_ms if self._last_report else -1.0

    def inspect(
        self, stream: BinaryIO, return_image: bool = False
    ) -> Tuple[ImageCheckReport, Optional[Image.Image]]:
        """Run the full check on ``stream`` and return the report.

        The decoded image is returned only when the check succeeds and
        ``return_image`` is set; the caller then owns it and must close it.
        On every other path the image is closed before returning. The stream
        itself is left open.
        """
        started = time.perf_counter()
        constraints = self._constraints

        try:
            data_size = measure_stream(stream)
        except StreamReadError as exc:
            LOGGER.debug("Could not measure stream: %s", exc)
            return self._finish(ImageCheckResult.STREAM_READ_ERROR, constraints), None

        if data_size == 0:
            return self._finish(ImageCheckResult.STREAM_READ_ERROR, constraints), None

        if constraints.max_data_size and data_size > constraints.max_data_size:
            return self._finish(ImageCheckResult.DATA_SIZE_TOO_HIGH, constraints, data_size), None

        try:
            image = decode_image(read_stream(stream))
        except StreamReadError as exc:
            LOGGER.debug("Could not read stream: %s", exc)
            return self._finish(ImageCheckResult.STREAM_READ_ERROR, constraints, data_size), None
        except InvalidImageError:
            return self._finish(ImageCheckResult.INVALID_IMAGE, constraints, data_size), None

        retained = False
        try:
            format_result = classify_format(image)
            if format_result is None:
                LOGGER.debug("Rejected image format %s", image.format)
                return self._finish(ImageCheckResult.UNSUPPORTED_FORMAT, constraints, data_size), None

            width, height = image.size
            violation = evaluate_size_constraints(width, height, constraints)
            if violation is not None:
                return self._finish(violation, constraints, data_size, width, height), None

            elapsed_ms = (time.perf_counter() - started) * 1000
            report = self._finish(format_result, constraints, data_size, width, height, elapsed_ms)
            retained = return_image
            return report, image if retained else None
        finally:
            if not retained:
                image.close()

    def check_stream(
        self, stream: BinaryIO, return_image: bool = False
    ) -> Tuple[ImageCheckResult, Optional[Image.Image]]:
        report, image = self.inspect(stream, return_image)
        return report.result, image

    def check(self, stream: BinaryIO) -> ImageCheckResult:
        result, _ = self.check_stream(stream)
        return result

    def check_bytes(
        self, data: bytes, return_image: bool = False
    ) -> Tuple[ImageCheckResult, Optional[Image.Image]]:
        return self.check_stream(io.BytesIO(data), return_image)

    def check_size_constraints(self, width: int, height: int) -> Optional[ImageCheckResult]:
        """Check known dimensions only; ``None`` means every bound is met."""
        return evaluate_size_constraints(width, height, self._constraints)

    def format_error_message(self, result: ImageCheckResult, locale: Optional[str] = None) -> str:
        """Format ``result`` with the last measurements and the current bounds.

        Call it right after the check that produced ``result``; the next check
        replaces the measurements.
        """
        report = self._last_report or ImageCheckReport(result=result)
        report = report.model_copy(update={"constraints": self._constraints})
        return format_check_message(result, report, self._translator, locale or self._locale)

    def _finish(
        self,
        result: ImageCheckResult,
        constraints: SizeConstraints,
        data_size: int = 0,
        width: int = 0,
        height: int = 0,
        elapsed_ms: float = -1.0,
    ) -> ImageCheckReport:
        if not result.is_success:
            LOGGER.debug("Image check failed with %s (%d bytes, %dx%d)", result.name, data_size, width, height)
        self._last_report = ImageCheckReport(
            result=result,
            data_size=data_size,
            width=width,
            height=height,
            elapsed_ms=elapsed_ms,
            constraints=constraints,
        )
        return self._last_report
