from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field

import structlog
from sqlalchemy.orm import Session

from firmdesk.core.diagnostics import Diagnostics
from firmdesk.core.logging import logger
from firmdesk.crud.imports import add_import_errors, create_import_run, set_import_status
from firmdesk.services.etl.columns import EntitySchema, EntityType
from firmdesk.services.etl.converter import convert_result
from firmdesk.services.etl.csv_parser import parse_csv
from firmdesk.services.etl.parsers import get_schema
from firmdesk.services.etl.submitter import BulkOutcome, BulkSubmitter
from firmdesk.services.etl.utils import text_sha256
from firmdesk.services.etl.validators import ParseResult, ValidationError, file_error
from firmdesk.services.store import RecordStore

SUBMIT_COLUMN = "Submit"


@dataclass
class ImportOutcome:
    import_run_id: int
    entity: EntityType
    status: str
    parsed: ParseResult
    bulk: BulkOutcome | None = None
    errors: list[ValidationError] = field(default_factory=list)


def _now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def parse_upload(text: str, entity: EntityType | str, strict_quotes: bool = False) -> ParseResult:
    return parse_csv(text, get_schema(entity), strict_quotes=strict_quotes)


def run_import(
    db: Session,
    store: RecordStore,
    entity: EntityType | str,
    file_name: str,
    text: str,
    max_workers: int = 8,
    diagnostics: Diagnostics | None = None,
) -> ImportOutcome:
    schema = get_schema(entity)
    parsed = parse_csv(text, schema)

    run = create_import_run(db, schema.entity.value, file_name, text_sha256(text), rows_total=len(parsed.rows))
    with structlog.contextvars.bound_contextvars(import_run_id=run.id, entity=schema.entity.value):
        return _execute(db, store, schema, run.id, parsed, max_workers, diagnostics)


def _execute(
    db: Session,
    store: RecordStore,
    schema: EntitySchema,
    run_id: int,
    parsed: ParseResult,
    max_workers: int,
    diagnostics: Diagnostics | None,
) -> ImportOutcome:
    # nothing is submitted unless every row is clean
    if not parsed.ok:
        errors = parsed.errors or [file_error("CSV file has no data rows")]
        add_import_errors(db, run_id, errors)
        set_import_status(db, run_id, "rejected", finished_at=_now(), rows_loaded=0)
        logger.info("import_rejected", errors=len(errors))
        return ImportOutcome(run_id, schema.entity, "rejected", parsed, errors=errors)

    try:
        set_import_status(db, run_id, "running", started_at=_now())

        payloads = convert_result(parsed, schema)
        submitter = BulkSubmitter(
            schema.entity.value,
            store.creator_for(schema.entity),
            max_workers=max_workers,
            diagnostics=diagnostics,
        )
        bulk = submitter.submit(payloads, parsed.row_numbers)

        if bulk.failed:
            add_import_errors(db, run_id, [
                ValidationError(row=r.row or 0, column=SUBMIT_COLUMN, message=r.error or "create failed")
                for r in bulk.failed
            ], stage="submit")

        set_import_status(db, run_id, bulk.status, finished_at=_now(), rows_loaded=len(bulk.succeeded))
        logger.info(
            "import_finished",
            status=bulk.status,
            rows_loaded=len(bulk.succeeded),
            errors=len(bulk.failed),
        )
        return ImportOutcome(run_id, schema.entity, bulk.status, parsed, bulk)

    except Exception as e:
        logger.exception("import_failed", error=str(e))
        if diagnostics is not None:
            diagnostics.report("import_failed", str(e), import_run_id=run_id, entity=schema.entity.value)
        db.rollback()
        set_import_status(db, run_id, "failed", finished_at=_now())
        raise
