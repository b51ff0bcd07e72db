"""Converter configuration using pydantic-settings.

Every field can be overridden with a `COMPANY_DATA_` environment variable,
e.g. `COMPANY_DATA_INPUT_FILE=companies.csv`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .rules import DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_FILE, INPUT_ENCODING, OUTPUT_ENCODING


class ConverterSettings(BaseSettings):
    """Input and output locations for one conversion run."""

    model_config = {"env_prefix": "COMPANY_DATA_"}

    input_file: Path = Path(DEFAULT_INPUT_FILE)
    output_file: Path = Path(DEFAULT_OUTPUT_FILE)
    input_encoding: str = INPUT_ENCODING
    output_encoding: str = OUTPUT_ENCODING
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
