"""Locale-aware ordering for company names.

Names are compared with the Unicode Collation Algorithm using the default
collation element table (DUCET), so case and diacritics are folded the way
the CLDR root locale does rather than by code point.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # loading the collation table is slow; build it once per process
    return Collator()


def collation_key(text: str) -> Tuple[int, ...]:
    return _collator().sort_key(text)
