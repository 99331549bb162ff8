import datetime as dt
from typing import Any
from pydantic import BaseModel

class ImportRunOut(BaseModel):
    id: int
    entity: str
    file_name: str
    file_hash: str
    status: str
    rows_total: int
    rows_loaded: int
    started_at: dt.datetime | None
    finished_at: dt.datetime | None

class ImportErrorOut(BaseModel):
    id: int
    stage: str
    row_num: int | None
    column: str | None
    message: str

class RowErrorOut(BaseModel):
    row: int
    column: str
    message: str

class PreviewOut(BaseModel):
    entity: str
    rows: list[dict[str, Any]]
    row_numbers: list[int]
    errors: list[RowErrorOut]
    skipped: int

class RowOutcomeOut(BaseModel):
    row: int | None
    ok: bool
    record_id: int | None = None
    error: str | None = None

class ImportResultOut(BaseModel):
    import_run_id: int
    entity: str
    status: str
    submitted: int
    succeeded: int
    failed: int
    results: list[RowOutcomeOut]

class DiagnosticEntryOut(BaseModel):
    kind: str
    message: str
    timestamp: dt.datetime
    context: dict[str, Any]

class DiagnosticsOut(BaseModel):
    started_at: dt.datetime
    # entries still held, older ones drop off the ring
    retained: int
    counts: dict[str, int]
    entries: list[DiagnosticEntryOut]
