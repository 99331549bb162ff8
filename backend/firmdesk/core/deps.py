from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from firmdesk.core.diagnostics import Diagnostics
from firmdesk.db.session import SessionLocal
from firmdesk.services.store import RecordStore

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_session_factory() -> Callable[[], Session]:
    return SessionLocal

def get_store(session_factory: Callable[[], Session] = Depends(get_session_factory)) -> RecordStore:
    return RecordStore(session_factory)

def get_diagnostics(request: Request) -> Diagnostics:
    return request.app.state.diagnostics
