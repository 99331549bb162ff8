from typing import Callable

from pydantic import BaseModel
from sqlalchemy.orm import Session

from firmdesk.crud.assignees import create_assignee
from firmdesk.crud.clients import create_client
from firmdesk.crud.tasks import create_task
from firmdesk.crud.todos import create_todo
from firmdesk.services.etl.columns import EntityType

_CREATORS: dict[EntityType, Callable[[Session, BaseModel], object]] = {
    EntityType.client: create_client,
    EntityType.task: create_task,
    EntityType.assignee: create_assignee,
    EntityType.todo: create_todo,
}


class RecordStore:
    """Create calls for the four record kinds, each in its own session.

    Every call opens a fresh session from ``session_factory`` so calls can
    run on worker threads without sharing a session.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def create(self, entity: EntityType | str, payload: BaseModel) -> int:
        creator = _CREATORS[EntityType(entity)]
        db = self.session_factory()
        try:
            record = creator(db, payload)
            return record.id
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def creator_for(self, entity: EntityType | str) -> Callable[[BaseModel], int]:
        kind = EntityType(entity)
        return lambda payload: self.create(kind, payload)
