"""
Record extraction: CSV text in, sorted company records out.

Responsibilities:
- line splitting (LF or CRLF) and blank-line removal
- header mapping for the required columns
- first-ISIN normalization of multi-valued identifier cells
- skipping rows without an identifier
- locale-aware ordering by company name

Pure transformation: no I/O, and errors abort the whole extraction.
"""

from __future__ import annotations

import logging
import re
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .collation import collation_key
from .errors import EmptyInputError, SchemaError
from .models import CompanyRecord, ExtractionResult, SkippedRow
from .parser import parse_line
from .rules import IDENTIFIER_COLUMN, IDENTIFIER_SEPARATOR, NAME_COLUMN, REQUIRED_COLUMNS

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
# whitespace plus the byte order mark, which str.strip() keeps
_EDGE_BLANKS = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


class HeaderMapping(NamedTuple):
    identifier_index: int
    name_index: int


def _trim(line: str) -> str:
    return _EDGE_BLANKS.sub("", line)


def split_lines(raw_text: str) -> List[Tuple[int, str]]:
    """Return (1-based line number, line) for every non-blank line, in order."""
    return [
        (number, line)
        for number, line in enumerate(_LINE_BREAK.split(raw_text), start=1)
        if _trim(line)
    ]


def map_header(fields: Sequence[str]) -> HeaderMapping:
    """Locate the required columns by exact, case-sensitive name."""
    missing = [column for column in REQUIRED_COLUMNS if column not in fields]
    if missing:
        raise SchemaError(missing)

    # list.index returns the first occurrence of a duplicated header
    return HeaderMapping(
        identifier_index=list(fields).index(IDENTIFIER_COLUMN),
        name_index=list(fields).index(NAME_COLUMN),
    )


def normalize_identifier(value: str) -> str:
    """Keep only the first pipe-separated identifier, trimmed."""
    return value.split(IDENTIFIER_SEPARATOR, 1)[0].strip()


def _field(values: Sequence[str], index: int) -> str:
    return values[index] if index < len(values) else ""


def _field_or_none(values: Sequence[str], index: int) -> Optional[str]:
    return values[index] if index < len(values) else None


def extract(raw_text: str) -> ExtractionResult:
    lines = split_lines(raw_text)
    if not lines:
        raise EmptyInputError()

    _, header_line = lines[0]
    mapping = map_header(parse_line(header_line))

    records: list[CompanyRecord] = []
    skipped: list[SkippedRow] = []

    for number, line in lines[1:]:
        values = parse_line(_trim(line))
        raw_identifier = _field(values, mapping.identifier_index)

        if not raw_identifier:
            logger.debug("line %d: no %s value, skipping", number, IDENTIFIER_COLUMN)
            skipped.append(
                SkippedRow(line=number, value=_field_or_none(values, mapping.identifier_index))
            )
            continue

        records.append(
            CompanyRecord(
                identifier=normalize_identifier(raw_identifier),
                name=_field(values, mapping.name_index),
            )
        )

    # sorted() is stable; ties keep input order
    records = sorted(records, key=lambda record: collation_key(record.name))

    logger.info(
        "extracted %d records from %d data lines (%d skipped)",
        len(records), len(lines) - 1, len(skipped),
    )
    return ExtractionResult(records=records, skipped=skipped, lines=len(lines) - 1)
