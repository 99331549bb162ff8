import dataclasses
import datetime as dt

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session

from firmdesk.core.config import settings
from firmdesk.core.deps import get_db, get_diagnostics, get_store
from firmdesk.core.diagnostics import Diagnostics
from firmdesk.crud.imports import get_import_run, list_import_errors, list_imports
from firmdesk.schemas.imports import (
    ImportErrorOut,
    ImportResultOut,
    ImportRunOut,
    PreviewOut,
    RowErrorOut,
    RowOutcomeOut,
)
from firmdesk.services.etl.columns import EntityType
from firmdesk.services.etl.importer import parse_upload, run_import
from firmdesk.services.etl.parsers import get_schema
from firmdesk.services.etl.templates import CSV_MEDIA_TYPE, generate_template, template_filename
from firmdesk.services.files import read_csv_upload
from firmdesk.services.store import RecordStore

router = APIRouter()


def _errors_out(errors) -> list[RowErrorOut]:
    return [RowErrorOut(row=e.row, column=e.column, message=e.message) for e in errors]


@router.get("", response_model=list[ImportRunOut])
def get_imports(
    entity: EntityType | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_imports(db, entity.value if entity else None)


@router.get("/{import_run_id}/errors", response_model=list[ImportErrorOut])
def get_errors(import_run_id: int, db: Session = Depends(get_db)):
    if not get_import_run(db, import_run_id):
        raise HTTPException(status_code=404, detail="Import run not found")
    return list_import_errors(db, import_run_id)


@router.get("/{entity}/template")
def download_template(entity: EntityType):
    schema = get_schema(entity)
    filename = template_filename(schema, dt.date.today())
    return Response(
        content=generate_template(schema),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{entity}/preview", response_model=PreviewOut)
def preview_upload(
    entity: EntityType,
    file: UploadFile = File(...),
    diagnostics: Diagnostics = Depends(get_diagnostics),
):
    try:
        text = read_csv_upload(file)
    except HTTPException as e:
        diagnostics.report("upload_rejected", str(e.detail), entity=entity.value, file_name=file.filename)
        raise
    result = parse_upload(text, entity)
    return PreviewOut(
        entity=entity.value,
        rows=[dataclasses.asdict(r) for r in result.rows],
        row_numbers=result.row_numbers,
        errors=_errors_out(result.errors),
        skipped=result.skipped,
    )


@router.post("/{entity}", response_model=ImportResultOut)
def upload_csv(
    entity: EntityType,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    store: RecordStore = Depends(get_store),
    diagnostics: Diagnostics = Depends(get_diagnostics),
):
    try:
        text = read_csv_upload(file)
    except HTTPException as e:
        diagnostics.report("upload_rejected", str(e.detail), entity=entity.value, file_name=file.filename)
        raise

    outcome = run_import(
        db,
        store,
        entity,
        file.filename,
        text,
        max_workers=settings.BULK_MAX_WORKERS,
        diagnostics=diagnostics,
    )

    if outcome.bulk is None:
        raise HTTPException(
            status_code=422,
            detail={
                "import_run_id": outcome.import_run_id,
                "errors": [e.model_dump() for e in _errors_out(outcome.errors)],
            },
        )

    bulk = outcome.bulk
    return ImportResultOut(
        import_run_id=outcome.import_run_id,
        entity=entity.value,
        status=outcome.status,
        submitted=len(bulk.results),
        succeeded=len(bulk.succeeded),
        failed=len(bulk.failed),
        results=[RowOutcomeOut(row=r.row, ok=r.ok, record_id=r.record_id, error=r.error) for r in bulk.results],
    )
