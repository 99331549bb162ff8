from sqlalchemy.orm import Session
from firmdesk.db.session import SessionLocal
from firmdesk.crud.clients import list_clients, create_client
from firmdesk.crud.assignees import list_assignees, create_assignee
from firmdesk.schemas.clients import ClientCreate
from firmdesk.schemas.assignees import AssigneeCreate

def seed_demo():
    db: Session = SessionLocal()
    try:
        if not list_clients(db):
            create_client(db, ClientCreate(name="Demo Client", notes="Seeded demo client"))
        if not list_assignees(db):
            create_assignee(db, AssigneeCreate(name="Demo Team", captain="Demo Captain"))
    finally:
        db.close()
