"""File pipeline: read the CSV, extract records, write the artifact."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO

from .config import ConverterSettings
from .errors import InputNotFoundError
from .extract import extract
from .models import ExtractionResult
from .render import render_company_data

logger = logging.getLogger(__name__)


def read_input(path: Path, encoding: str) -> str:
    if not path.is_file():
        raise InputNotFoundError(path)
    return path.read_text(encoding=encoding)


def write_output(path: Path, text: str, encoding: str) -> None:
    # newline="" keeps the artifact byte-identical across platforms
    with path.open("w", encoding=encoding, newline="") as fh:
        fh.write(text)


def convert(
    settings: ConverterSettings,
    source: Optional[TextIO] = None,
    sink: Optional[TextIO] = None,
) -> ExtractionResult:
    """
    Run one conversion.

    `source` and `sink` replace the input and output files when given. The
    output is written only once extraction and rendering have succeeded.
    """
    if source is not None:
        raw_text = source.read()
    else:
        raw_text = read_input(settings.input_file, settings.input_encoding)

    result = extract(raw_text)
    artifact = render_company_data(result.records)

    if sink is not None:
        sink.write(artifact)
    else:
        write_output(settings.output_file, artifact, settings.output_encoding)
        logger.debug("wrote %d bytes to %s", len(artifact), settings.output_file)

    return result
