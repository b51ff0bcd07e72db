import hashlib

from fastapi import FastAPI, UploadFile, File, HTTPException
from .encoding import decode_csv_bytes
from .errors import EmptyInputError, SchemaError
from .extract import extract
from .models import (
    ConversionReport,
    ConvertResponse,
    GeneratedArtifact,
    HealthResponse,
    ReportItem,
    ReportSummary,
)
from .render import render_company_data
from .rules import IDENTIFIER_COLUMN

app = FastAPI(
    title="company-data",
    description="Convert company CSV exports into a sorted COMPANY_DATA source file",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/convert", response_model=ConvertResponse)
async def convert_csv(file: UploadFile = File(...)):
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    text, encoding_report = decode_csv_bytes(raw)

    try:
        result = extract(text)
    except (EmptyInputError, SchemaError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    content = render_company_data(result.records)
    warnings = [
        ReportItem(
            row=row.line,
            column=IDENTIFIER_COLUMN,
            issue=row.reason,
            value=row.value,
            action="skipped",
        )
        for row in result.skipped
    ]

    return ConvertResponse(
        records=result.records,
        artifact=GeneratedArtifact(
            sha256=hashlib.sha256(content.encode("utf-8")).hexdigest(),
            content=content,
        ),
        report=ConversionReport(
            summary=ReportSummary(
                lines=result.lines,
                records=result.count,
                skipped=len(result.skipped),
            ),
            encoding=encoding_report,
            warnings=warnings,
        ),
    )
