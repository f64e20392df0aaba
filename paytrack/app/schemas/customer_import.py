"""Bulk customer import payloads."""

from typing import Dict, List

from pydantic import BaseModel

from paytrack.app.schemas.customer import CustomerRead


class BulkImportRequest(BaseModel):
    csv_data: str | None = None


class ImportedRow(BaseModel):
    row: int
    customer: CustomerRead


class FailedRow(BaseModel):
    row: int
    data: Dict[str, str | None]
    error: str


class ImportResults(BaseModel):
    success: List[ImportedRow] = []
    failed: List[FailedRow] = []


class BulkImportResult(BaseModel):
    total: int
    success_count: int
    failed_count: int
    results: ImportResults
