from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .rules import DEFAULT_OUTPUT_FILE


class CompanyRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str = Field(alias="ISIN", examples=["US0378331005"])
    name: str = Field(alias="Name", examples=["Apple Inc."])


class SkippedRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    reason: str = "missing_identifier"
    value: Optional[str] = None


class ExtractionResult(BaseModel):
    """Sorted company records plus the rows that were left out."""

    model_config = ConfigDict(frozen=True)

    records: List[CompanyRecord] = Field(default_factory=list)
    skipped: List[SkippedRow] = Field(default_factory=list)
    lines: int = 0

    @property
    def count(self) -> int:
        return len(self.records)


class GeneratedArtifact(BaseModel):
    filename: str = Field(default=DEFAULT_OUTPUT_FILE)
    sha256: str
    content: str


class ReportSummary(BaseModel):
    lines: int = 0
    records: int = 0
    skipped: int = 0


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str = "utf-8"
    decode_fallback: bool = False


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ConversionReport(BaseModel):
    summary: ReportSummary
    encoding: EncodingReport = Field(default_factory=EncodingReport)
    warnings: List[ReportItem] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    records: List[CompanyRecord]
    artifact: GeneratedArtifact
    report: ConversionReport

class HealthResponse(BaseModel):
    ok: bool = True
