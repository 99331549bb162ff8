from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from firmdesk.core.deps import get_db
from firmdesk.crud.clients import create_client, get_client, list_client_names, list_clients
from firmdesk.schemas.clients import ClientCreate, ClientOut

router = APIRouter()

@router.get("", response_model=list[ClientOut])
def get_clients(q: str | None = Query(None), db: Session = Depends(get_db)):
    return list_clients(db, q=q)

@router.get("/names", response_model=list[str])
def get_client_names(db: Session = Depends(get_db)):
    return list_client_names(db)

@router.get("/{client_id}", response_model=ClientOut)
def get_client_by_id(client_id: int, db: Session = Depends(get_db)):
    c = get_client(db, client_id)
    if not c:
        raise HTTPException(status_code=404, detail="Client not found")
    return c

@router.post("", response_model=ClientOut)
def post_client(data: ClientCreate, db: Session = Depends(get_db)):
    return create_client(db, data)
