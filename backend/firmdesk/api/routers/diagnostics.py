from fastapi import APIRouter, Depends, Query

from firmdesk.core.deps import get_diagnostics
from firmdesk.core.diagnostics import Diagnostics
from firmdesk.schemas.imports import DiagnosticEntryOut, DiagnosticsOut

router = APIRouter()

@router.get("", response_model=DiagnosticsOut)
def get_report(
    kind: str | None = Query(None),
    limit: int = Query(50, ge=1, le=1000),
    diagnostics: Diagnostics = Depends(get_diagnostics),
):
    entries = diagnostics.entries(kind)[-limit:]
    return DiagnosticsOut(
        started_at=diagnostics.started_at,
        retained=len(diagnostics),
        counts=diagnostics.counts(),
        entries=[
            DiagnosticEntryOut(kind=e.kind, message=e.message, timestamp=e.timestamp, context=e.context)
            for e in reversed(entries)
        ],
    )

@router.delete("")
def clear_report(diagnostics: Diagnostics = Depends(get_diagnostics)):
    diagnostics.clear()
    return {"status": "ok"}
