from __future__ import annotations

"""Pixel dimension checks against configured bounds."""
from typing import Optional

from ..models.check_result import ImageCheckResult
from ..models.constraints import SizeConstraints


def evaluate_size_constraints(
    width: int, height: int, constraints: SizeConstraints
) -> Optional[ImageCheckResult]:
    """Return the first violated constraint, or ``None`` when all are satisfied.

    Lower bounds are checked before upper bounds, width before height. A width
    below an exact (min == max) width reports a mismatch instead of "too low",
    and when the height is pinned as well the whole size is reported as
    mismatching. Upper bounds are plain caps.
    """
    if width == 0 or height == 0:
        return ImageCheckResult.IMAGE_IS_EMPTY

    if width < constraints.min_width:
        if constraints.exact_width:
            if constraints.exact_height:
                return ImageCheckResult.SIZE_MISMATCH
            return ImageCheckResult.WIDTH_MISMATCH
        return ImageCheckResult.WIDTH_TOO_LOW

    if height < constraints.min_height:
        if constraints.exact_height:
            return ImageCheckResult.HEIGHT_MISMATCH
        return ImageCheckResult.HEIGHT_TOO_LOW

    if constraints.max_width and width > constraints.max_width:
        return ImageCheckResult.WIDTH_TOO_HIGH

    if constraints.max_height and height > constraints.max_height:
        return ImageCheckResult.HEIGHT_TOO_HIGH

    return None
