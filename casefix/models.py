from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class CorrectedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class CorrectionSummary(BaseModel):
    records: int = 0
    corrected: int = 0
    passthrough: int = 0
    words_resolved: int = 0
    elapsed_seconds: float = Field(default=0.0, examples=[0.42])


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False
    output: str = "utf-8"


class CorrectionReport(BaseModel):
    summary: CorrectionSummary
    encoding: EncodingReport


class CorrectResponse(BaseModel):
    corrected_csv: CorrectedCsv
    report: CorrectionReport

class HealthResponse(BaseModel):
    ok: bool = True
