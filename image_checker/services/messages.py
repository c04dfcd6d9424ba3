from __future__ import annotations

"""Human-readable messages for image check results."""
from typing import Optional

from ..i18n import Translator
from ..models.check_result import ImageCheckReport, ImageCheckResult

_DEFAULT_TRANSLATOR = Translator()


def format_check_message(
    result: ImageCheckResult,
    report: ImageCheckReport,
    translator: Optional[Translator] = None,
    locale: Optional[str] = None,
) -> str:
    """Format the template for ``result`` with the measurements in ``report``.

    ``result`` is usually ``report.result`` but may differ, e.g. to log a
    success template for a report that failed.
    """
    template = (translator or _DEFAULT_TRANSLATOR).translate(result.message_key, locale)
    constraints = report.constraints
    return template.format(
        report.data_size,
        report.width,
        report.height,
        constraints.max_data_size,
        constraints.min_width,
        constraints.min_height,
        constraints.max_width,
        constraints.max_height,
    )
