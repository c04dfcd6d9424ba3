from __future__ import annotations

"""Runs blocking image checks off the event loop with a deadline."""
import asyncio
import io
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..models.check_result import ImageCheckReport
from ..models.constraints import SizeConstraints
from .image_checker import ImageChecker

LOGGER = logging.getLogger(__name__)


class AsyncImageChecker:
    def __init__(self, constraints: Optional[SizeConstraints] = None, *, workers: int = 2) -> None:
        self._constraints = constraints or SizeConstraints()
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="image-check")

    @property
    def constraints(self) -> SizeConstraints:
        return self._constraints

    async def check_bytes(self, data: bytes, timeout: float = 10.0) -> Optional[ImageCheckReport]:
        """Check ``data`` in a worker thread, ``None`` if it takes longer than ``timeout``.

        A timed out decode keeps running in its worker until it finishes; only
        the wait is abandoned.
        """
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(self._executor, self._inspect, data),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            LOGGER.warning("Image check timed out after %.2f seconds", timeout)
            return None

    def _inspect(self, data: bytes) -> ImageCheckReport:
        # One checker per job: checkers keep per-call state.
        report, _ = ImageChecker(self._constraints).inspect(io.BytesIO(data))
        return report

    async def close(self) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._executor.shutdown, True)
