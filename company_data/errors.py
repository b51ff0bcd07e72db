"""Error taxonomy for the converter.

Errors are raised by the core and the file-read collaborator and caught only
at the boundaries (CLI and HTTP route).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .rules import IDENTIFIER_COLUMN, NAME_COLUMN


class CompanyDataError(Exception):
    """Base exception for all conversion failures."""


class InputNotFoundError(CompanyDataError):
    """Raised when the input path does not resolve to a readable file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Input file not found: {self.path}")


class EmptyInputError(CompanyDataError):
    """Raised when no non-blank lines remain."""

    def __init__(self) -> None:
        super().__init__("CSV file is empty")


class SchemaError(CompanyDataError):
    """Raised when the header lacks a required column."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f'CSV must contain "{IDENTIFIER_COLUMN}" and "{NAME_COLUMN}" columns '
            f"(missing: {', '.join(self.missing)})"
        )
