import datetime as dt
from sqlalchemy.orm import Session
from firmdesk.db.models.import_run import ImportRun
from firmdesk.db.models.import_error import ImportRowError
from firmdesk.services.etl.validators import ValidationError

def get_import_run(db: Session, import_run_id: int) -> ImportRun | None:
    return db.query(ImportRun).filter(ImportRun.id==import_run_id).one_or_none()

def create_import_run(db: Session, entity: str, file_name: str, file_hash: str, rows_total: int = 0) -> ImportRun:
    run = ImportRun(entity=entity, file_name=file_name, file_hash=file_hash, status="queued", rows_total=rows_total)
    db.add(run)
    db.commit()
    db.refresh(run)
    return run

def set_import_status(
    db: Session,
    import_run_id: int,
    status: str,
    started_at: dt.datetime | None = None,
    finished_at: dt.datetime | None = None,
    rows_loaded: int | None = None,
):
    run = db.query(ImportRun).filter(ImportRun.id==import_run_id).one()
    run.status = status
    if started_at is not None:
        run.started_at = started_at
    if finished_at is not None:
        run.finished_at = finished_at
    if rows_loaded is not None:
        run.rows_loaded = rows_loaded
    db.commit()

def list_imports(db: Session, entity: str | None = None):
    qry = db.query(ImportRun)
    if entity:
        qry = qry.filter(ImportRun.entity==entity)
    return qry.order_by(ImportRun.id.desc()).all()

def list_import_errors(db: Session, import_run_id: int):
    return db.query(ImportRowError).filter(ImportRowError.import_run_id==import_run_id).order_by(ImportRowError.id).all()

def add_import_errors(db: Session, import_run_id: int, errors: list[ValidationError], stage: str = "parse"):
    for er in errors:
        db.add(ImportRowError(
            import_run_id=import_run_id,
            stage=stage,
            row_num=er.row,
            column=er.column,
            message=er.message
        ))
    db.commit()
