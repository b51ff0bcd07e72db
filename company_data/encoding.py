"""
Decoding of uploaded CSV bytes.

Files read from disk are expected to be UTF-8; uploads can arrive in
whatever encoding a spreadsheet exported, so they are detected first.
"""

from __future__ import annotations

from charset_normalizer import from_bytes

from .models import EncodingReport

_UTF8_BOM = b"\xef\xbb\xbf"


def decode_csv_bytes(raw: bytes) -> tuple[str, EncodingReport]:
    """
    Decode input bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is stripped so it cannot leak into the first header name.
    - If decode with the detected encoding fails, fall back to UTF-8.
    - Last resort: decode with replacement characters and report it.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(_UTF8_BOM) and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (LookupError, UnicodeDecodeError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
            decode_fallback = True
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
            decode_fallback = True

    report = EncodingReport(
        detected=detected,
        decode_used=decode_used,
        decode_fallback=decode_fallback,
    )
    return text, report
