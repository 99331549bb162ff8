from sqlalchemy.orm import Session
from firmdesk.db.models.client import Client
from firmdesk.schemas.clients import ClientCreate

def list_clients(db: Session, q: str | None = None):
    qry = db.query(Client)
    if q:
        qry = qry.filter(Client.name.ilike(f"%{q.strip()}%"))
    return qry.order_by(Client.name, Client.id).all()

def list_client_names(db: Session) -> list[str]:
    rows = db.query(Client.name).distinct().order_by(Client.name).all()
    return [r[0] for r in rows]

def get_client(db: Session, client_id: int) -> Client | None:
    return db.query(Client).filter(Client.id == client_id).one_or_none()

def create_client(db: Session, data: ClientCreate) -> Client:
    c = Client(
        name=data.name.strip(),
        gstin=data.gstin,
        pan=data.pan,
        notes=data.notes,
    )
    db.add(c)
    db.commit()
    db.refresh(c)
    return c
