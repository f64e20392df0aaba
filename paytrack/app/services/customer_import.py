"""Bulk customer import from CSV text."""

import csv
import io
import logging
from typing import Dict, List

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from paytrack.app.crud.crud_customer import customer_crud
from paytrack.app.schemas.customer import CustomerCreate, CustomerRead
from paytrack.app.schemas.customer_import import BulkImportResult, FailedRow, ImportedRow, ImportResults

logger = logging.getLogger(__name__)

CANDIDATE_DELIMITERS = ",;\t|"
# Row 1 is the header line.
HEADER_OFFSET = 2


def detect_delimiter(csv_text: str) -> str:
    sample = "\n".join(csv_text.splitlines()[:20])
    try:
        return csv.Sniffer().sniff(sample, delimiters=CANDIDATE_DELIMITERS).delimiter
    except csv.Error:
        return ","


def parse_csv_rows(csv_text: str) -> List[Dict[str, str]]:
    """Parse CSV text into dicts keyed by trimmed, lower-cased headers."""
    reader = csv.DictReader(io.StringIO(csv_text.lstrip("\ufeff")), delimiter=detect_delimiter(csv_text))
    if reader.fieldnames is None:
        return []
    reader.fieldnames = [(name or "").strip().lower() for name in reader.fieldnames]

    rows = []
    for raw in reader:
        # Columns beyond the header end up under the None key.
        row = {key: (value or "").strip() for key, value in raw.items() if isinstance(key, str) and key}
        if not any(row.values()):
            continue
        rows.append(row)
    return rows


def map_customer_columns(row: Dict[str, str]) -> dict:
    return {
        "name": row.get("name") or row.get("customer_name") or "",
        "email": row.get("email") or None,
        "phone": row.get("phone") or None,
        "company": row.get("company") or None,
    }


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(messages)


def import_customers_csv(db: Session, *, csv_text: str, owner_id: str) -> BulkImportResult:
    """Validate and insert each CSV row independently, collecting failures."""
    rows = parse_csv_rows(csv_text)
    results = ImportResults()

    for index, row in enumerate(rows):
        row_number = index + HEADER_OFFSET
        try:
            customer_in = CustomerCreate.model_validate(map_customer_columns(row))
            customer = customer_crud.create(db, obj_in=customer_in, owner_id=owner_id)
        except ValidationError as exc:
            error = _format_validation_error(exc)
        except SQLAlchemyError as exc:
            db.rollback()
            error = str(exc.__cause__ or exc)
        else:
            results.success.append(ImportedRow(row=row_number, customer=CustomerRead.model_validate(customer)))
            continue

        logger.warning("Bulk import row %d rejected: %s", row_number, error)
        results.failed.append(FailedRow(row=row_number, data=row, error=error))

    logger.info(
        "Bulk import for user %s: %d rows, %d imported, %d failed",
        owner_id,
        len(rows),
        len(results.success),
        len(results.failed),
    )
    return BulkImportResult(
        total=len(rows),
        success_count=len(results.success),
        failed_count=len(results.failed),
        results=results,
    )
