from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from firmdesk.core.deps import get_db
from firmdesk.crud.tasks import create_task, delete_task, get_task, list_tasks, update_task
from firmdesk.schemas.tasks import TaskCreate, TaskOut, TaskUpdate

router = APIRouter()

@router.get("", response_model=list[TaskOut])
def get_tasks(
    client_name: str | None = Query(None),
    status: str | None = Query(None),
    limit: int = Query(500, ge=1, le=5000),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    return list_tasks(db, client_name=client_name, status=status, limit=limit, offset=offset)

@router.get("/{task_id}", response_model=TaskOut)
def get_task_by_id(task_id: int, db: Session = Depends(get_db)):
    t = get_task(db, task_id)
    if not t:
        raise HTTPException(status_code=404, detail="Task not found")
    return t

@router.post("", response_model=TaskOut)
def post_task(data: TaskCreate, db: Session = Depends(get_db)):
    return create_task(db, data)

@router.put("/{task_id}", response_model=TaskOut)
def put_task(task_id: int, data: TaskUpdate, db: Session = Depends(get_db)):
    t = get_task(db, task_id)
    if not t:
        raise HTTPException(status_code=404, detail="Task not found")
    return update_task(db, t, data)

@router.delete("/{task_id}")
def remove_task(task_id: int, db: Session = Depends(get_db)):
    t = get_task(db, task_id)
    if not t:
        raise HTTPException(status_code=404, detail="Task not found")
    delete_task(db, t)
    return {"status": "ok"}
