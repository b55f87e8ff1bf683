from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class SeparatorResponse(BaseModel):
    separator: str
    encoding: str = Field(default="utf-8")
    lines: int = 0


class ParseResponse(BaseModel):
    separator: str
    encoding: str = Field(default="utf-8")
    headers: Optional[List[str]] = Field(default=None, examples=[None])
    record_count: int = 0
    records: List[List[str]] = Field(default_factory=list)
    table: str = ""


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    detail: ErrorDetail


class HealthResponse(BaseModel):
    ok: bool = True
