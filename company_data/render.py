"""Render extracted records as the generated COMPANY_DATA source file."""

from __future__ import annotations

import json
from typing import Iterable

from .models import CompanyRecord
from .rules import ARTIFACT_INDENT, ARTIFACT_VARIABLE


def render_company_data(records: Iterable[CompanyRecord]) -> str:
    """
    Serialize records as `COMPANY_DATA = <json array>` plus a newline.

    Keys are emitted as ISIN then Name, indented by two spaces, with
    non-ASCII characters written as-is.
    """
    payload = [record.model_dump(by_alias=True) for record in records]
    body = json.dumps(payload, indent=ARTIFACT_INDENT, ensure_ascii=False)
    return f"{ARTIFACT_VARIABLE} = {body}\n"
