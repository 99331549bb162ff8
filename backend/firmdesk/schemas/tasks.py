from pydantic import BaseModel, Field, field_validator

from firmdesk.services.task_status import ALLOWED_TASK_STATUSES, is_valid_status, normalize_status

def _check_status(cls, v: str | None) -> str | None:
    if v is None or not v.strip():
        return None
    if not is_valid_status(v):
        raise ValueError(f"Status must be one of: {', '.join(ALLOWED_TASK_STATUSES)}")
    return normalize_status(v)

class TaskCreate(BaseModel):
    client_name: str = Field(..., min_length=1, max_length=256)
    task_category: str = Field(..., min_length=1, max_length=128)
    sub_category: str = Field(..., min_length=1, max_length=128)
    status: str | None = None
    comment: str | None = None
    assigned_name: str | None = None
    # epoch nanoseconds
    due_date: int | None = None
    assignment_date: int | None = None
    completion_date: int | None = None
    bill: float | None = None
    advance_received: float | None = None
    outstanding_amount: float | None = None
    payment_status: str | None = None

    known_status = field_validator("status")(_check_status)

class TaskUpdate(BaseModel):
    """Fields left out of the request body are not touched."""

    client_name: str | None = Field(default=None, min_length=1, max_length=256)
    task_category: str | None = Field(default=None, min_length=1, max_length=128)
    sub_category: str | None = Field(default=None, min_length=1, max_length=128)
    status: str | None = None
    comment: str | None = None
    assigned_name: str | None = None
    due_date: int | None = None
    assignment_date: int | None = None
    completion_date: int | None = None
    bill: float | None = None
    advance_received: float | None = None
    outstanding_amount: float | None = None
    payment_status: str | None = None

    known_status = field_validator("status")(_check_status)

class TaskOut(BaseModel):
    id: int
    client_name: str
    task_category: str
    sub_category: str
    status: str | None = None
    comment: str | None = None
    assigned_name: str | None = None
    due_date: int | None = None
    assignment_date: int | None = None
    completion_date: int | None = None
    bill: float | None = None
    advance_received: float | None = None
    outstanding_amount: float | None = None
    payment_status: str | None = None
