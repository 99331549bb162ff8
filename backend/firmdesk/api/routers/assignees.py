from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from firmdesk.core.deps import get_db
from firmdesk.crud.assignees import create_assignee, get_assignee, list_assignee_names, list_assignees
from firmdesk.schemas.assignees import AssigneeCreate, AssigneeFormIn, AssigneeOut

router = APIRouter()

@router.get("", response_model=list[AssigneeOut])
def get_assignees(db: Session = Depends(get_db)):
    return list_assignees(db)

@router.get("/names", response_model=list[str])
def get_assignee_names(db: Session = Depends(get_db)):
    return list_assignee_names(db)

@router.get("/{assignee_id}", response_model=AssigneeOut)
def get_assignee_by_id(assignee_id: int, db: Session = Depends(get_db)):
    a = get_assignee(db, assignee_id)
    if not a:
        raise HTTPException(status_code=404, detail="Assignee not found")
    return a

@router.post("", response_model=AssigneeOut)
def post_assignee(data: AssigneeCreate, db: Session = Depends(get_db)):
    return create_assignee(db, data)

@router.post("/form", response_model=AssigneeOut)
def post_assignee_form(data: AssigneeFormIn, db: Session = Depends(get_db)):
    return create_assignee(db, data.to_create())
