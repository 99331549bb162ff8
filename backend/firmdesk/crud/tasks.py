from sqlalchemy import or_
from sqlalchemy.orm import Session
from firmdesk.db.models.task import Task
from firmdesk.schemas.tasks import TaskCreate, TaskUpdate
from firmdesk.services.task_status import LEGACY_STATUS_MAP, normalize_status

def list_tasks(
    db: Session,
    client_name: str | None = None,
    status: str | None = None,
    limit: int = 500,
    offset: int = 0,
):
    qry = db.query(Task)
    if client_name:
        qry = qry.filter(Task.client_name == client_name.strip())
    if status:
        wanted = normalize_status(status)
        # rows written before the status rename still carry legacy labels
        legacy = [k for k, v in LEGACY_STATUS_MAP.items() if v == wanted]
        qry = qry.filter(or_(Task.status == wanted, Task.status.in_(legacy)))
    qry = qry.order_by(Task.id)
    if offset:
        qry = qry.offset(offset)
    if limit:
        qry = qry.limit(limit)
    return qry.all()

def get_task(db: Session, task_id: int) -> Task | None:
    return db.query(Task).filter(Task.id == task_id).one_or_none()

def create_task(db: Session, data: TaskCreate) -> Task:
    t = Task(**data.model_dump())
    t.client_name = t.client_name.strip()
    t.task_category = t.task_category.strip()
    t.sub_category = t.sub_category.strip()
    db.add(t)
    db.commit()
    db.refresh(t)
    return t

def update_task(db: Session, t: Task, data: TaskUpdate) -> Task:
    # explicit nulls clear a field, omitted fields stay as they are
    for field, v in data.model_dump(exclude_unset=True).items():
        if field in ("client_name", "task_category", "sub_category"):
            if v is None:
                continue
            v = v.strip()
        setattr(t, field, v)
    db.commit()
    db.refresh(t)
    return t

def delete_task(db: Session, t: Task) -> None:
    db.delete(t)
    db.commit()
