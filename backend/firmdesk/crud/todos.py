from sqlalchemy.orm import Session
from firmdesk.db.models.todo import Todo
from firmdesk.schemas.todos import TodoCreate, TodoUpdate

def list_todos(db: Session, completed: bool | None = None):
    qry = db.query(Todo)
    if completed is not None:
        qry = qry.filter(Todo.completed.is_(completed))
    return qry.order_by(Todo.priority.is_(None), Todo.priority, Todo.id).all()

def get_todo(db: Session, todo_id: int) -> Todo | None:
    return db.query(Todo).filter(Todo.id == todo_id).one_or_none()

def create_todo(db: Session, data: TodoCreate) -> Todo:
    t = Todo(**data.model_dump())
    db.add(t)
    db.commit()
    db.refresh(t)
    return t

def update_todo(db: Session, t: Todo, data: TodoUpdate) -> Todo:
    for field, v in data.model_dump(exclude_unset=True).items():
        if field in ("title", "completed") and v is None:
            continue
        setattr(t, field, v)
    db.commit()
    db.refresh(t)
    return t

def delete_todo(db: Session, t: Todo) -> None:
    db.delete(t)
    db.commit()
