"""
Deterministic conversion rules.

This file exists to make non-goals explicit and enforceable: one delimiter,
one quote character, two required columns.
"""

DELIMITER = ","
QUOTE_CHAR = '"'

IDENTIFIER_COLUMN = "ISIN"
NAME_COLUMN = "Name"
REQUIRED_COLUMNS = (IDENTIFIER_COLUMN, NAME_COLUMN)

# multiple ISINs in one cell are pipe separated; only the first is kept
IDENTIFIER_SEPARATOR = "|"

DEFAULT_INPUT_FILE = "companies 16.csv"
DEFAULT_OUTPUT_FILE = "COMPANY_DATA.js"

INPUT_ENCODING = "utf-8-sig"  # tolerate a UTF-8 BOM in front of the header
OUTPUT_ENCODING = "utf-8"

ARTIFACT_VARIABLE = "COMPANY_DATA"
ARTIFACT_INDENT = 2
