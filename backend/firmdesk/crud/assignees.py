from sqlalchemy.orm import Session
from firmdesk.db.models.assignee import Assignee
from firmdesk.schemas.assignees import AssigneeCreate

def list_assignees(db: Session):
    return db.query(Assignee).order_by(Assignee.name, Assignee.id).all()

def list_assignee_names(db: Session) -> list[str]:
    rows = db.query(Assignee.name).distinct().order_by(Assignee.name).all()
    return [r[0] for r in rows]

def get_assignee(db: Session, assignee_id: int) -> Assignee | None:
    return db.query(Assignee).filter(Assignee.id == assignee_id).one_or_none()

def create_assignee(db: Session, data: AssigneeCreate) -> Assignee:
    a = Assignee(name=data.name.strip(), captain=data.captain)
    db.add(a)
    db.commit()
    db.refresh(a)
    return a
