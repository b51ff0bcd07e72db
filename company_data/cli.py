"""Command-line entry point.

No flags: paths come from `ConverterSettings` (defaults or `COMPANY_DATA_*`
environment variables). This is the only place errors are caught and
reported.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .config import ConverterSettings
from .convert import convert
from .errors import CompanyDataError, InputNotFoundError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Status lines go to stdout, warnings and errors to stderr."""
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(lambda record: record.levelno < logging.WARNING)
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    logging.basicConfig(level=level, format="%(message)s", handlers=[out, err])


def run(settings: ConverterSettings) -> int:
    """Convert once and report the outcome; returns a process exit code."""
    logger.info("Reading %s...", settings.input_file)

    try:
        result = convert(settings)
    except CompanyDataError as exc:
        logger.error("Error: %s", exc)
        if isinstance(exc, InputNotFoundError):
            logger.error(
                'File "%s" not found. Make sure it\'s in the current directory.',
                settings.input_file,
            )
        return 1
    except Exception as exc:
        logger.error("Error: %s", exc)
        logger.debug("unexpected failure", exc_info=True)
        return 1

    logger.info("Successfully processed %d companies", result.count)
    logger.info("Output saved to %s", settings.output_file)
    return 0


def main(settings: Optional[ConverterSettings] = None) -> int:
    if settings is None:
        try:
            settings = ConverterSettings()
        except ValidationError as exc:
            configure_logging("INFO")
            logger.error("Error: invalid configuration: %s", exc)
            return 1
    configure_logging(settings.log_level)
    return run(settings)
