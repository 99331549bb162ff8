from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from firmdesk.core.deps import get_db
from firmdesk.crud.todos import create_todo, delete_todo, get_todo, list_todos, update_todo
from firmdesk.schemas.todos import TodoCreate, TodoOut, TodoUpdate

router = APIRouter()

@router.get("", response_model=list[TodoOut])
def get_todos(completed: bool | None = Query(None), db: Session = Depends(get_db)):
    return list_todos(db, completed=completed)

@router.get("/{todo_id}", response_model=TodoOut)
def get_todo_by_id(todo_id: int, db: Session = Depends(get_db)):
    t = get_todo(db, todo_id)
    if not t:
        raise HTTPException(status_code=404, detail="Todo not found")
    return t

@router.post("", response_model=TodoOut)
def post_todo(data: TodoCreate, db: Session = Depends(get_db)):
    return create_todo(db, data)

@router.put("/{todo_id}", response_model=TodoOut)
def put_todo(todo_id: int, data: TodoUpdate, db: Session = Depends(get_db)):
    t = get_todo(db, todo_id)
    if not t:
        raise HTTPException(status_code=404, detail="Todo not found")
    return update_todo(db, t, data)

@router.delete("/{todo_id}")
def remove_todo(todo_id: int, db: Session = Depends(get_db)):
    t = get_todo(db, todo_id)
    if not t:
        raise HTTPException(status_code=404, detail="Todo not found")
    delete_todo(db, t)
    return {"status": "ok"}
