from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import Settings, load_settings
from .i18n import Translator
from .services.async_checker import AsyncImageChecker
from .services.messages import format_check_message

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check that files are JPEG, PNG or GIF images within size bounds.")
    parser.add_argument("files", nargs="+", type=Path)
    parser.add_argument("--max-data-size", type=int, help="maximum file size in bytes")
    parser.add_argument("--max-width", type=int)
    parser.add_argument("--max-height", type=int)
    parser.add_argument("--min-width", type=int)
    parser.add_argument("--min-height", type=int)
    parser.add_argument("--locale", help="message language (en, ru)")
    parser.add_argument("--timeout", type=float, help="seconds allowed per file")
    return parser


def merge_settings(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        name: getattr(args, name)
        for name in ("max_data_size", "max_width", "max_height", "min_width", "min_height", "locale")
        if getattr(args, name) is not None
    }
    if args.timeout is not None:
        overrides["check_timeout"] = args.timeout
    return Settings.model_validate({**settings.model_dump(), **overrides})


async def run_checks(files: Sequence[Path], settings: Settings) -> List[bool]:
    translator = Translator(default_locale=settings.locale)
    checker = AsyncImageChecker(settings.constraints(), workers=settings.check_workers)
    outcomes: List[bool] = []
    try:
        for path in files:
            try:
                data = path.read_bytes()
            except OSError as exc:
                LOGGER.warning("Could not read %s: %s", path, exc)
                data = b""
            report = await checker.check_bytes(data, timeout=settings.check_timeout)
            if report is None:
                print(f"{path}: {translator.translate('cli_timeout')}")
                outcomes.append(False)
                continue
            print(f"{path}: {format_check_message(report.result, report, translator)}")
            outcomes.append(report.ok)
    finally:
        await checker.close()
    return outcomes


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = merge_settings(load_settings(), args)
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc}")
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    LOGGER.info("Checking %d file(s)", len(args.files))
    outcomes = asyncio.run(run_checks(args.files, settings))
    return 0 if all(outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
