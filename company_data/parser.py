"""Single-line CSV tokenizer.

Comma delimiter, double-quote quoting, doubled quotes as an escaped quote.
An unterminated quoted field closes at end of line instead of raising.
"""

from __future__ import annotations

from .rules import DELIMITER, QUOTE_CHAR


def parse_line(line: str) -> list[str]:
    """
    Split one CSV line into its field values.

    Rules:
    - A quote outside a quoted field opens one; the quote is not kept.
    - Two quotes inside a quoted field produce one literal quote.
    - A single quote inside a quoted field closes it.
    - A comma outside a quoted field ends the current field.
    - The last field is always emitted, even when empty.
    """
    values: list[str] = []
    buf: list[str] = []
    in_quotes = False

    i = 0
    n = len(line)
    while i < n:
        char = line[i]

        if char == QUOTE_CHAR:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE_CHAR:
                buf.append(QUOTE_CHAR)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            values.append("".join(buf))
            buf = []
        else:
            buf.append(char)

        i += 1

    values.append("".join(buf))
    return values
