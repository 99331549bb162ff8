import datetime as dt
from pydantic import BaseModel, Field

class ClientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    gstin: str | None = Field(default=None, max_length=32)
    pan: str | None = Field(default=None, max_length=16)
    notes: str | None = None

class ClientOut(BaseModel):
    id: int
    name: str
    gstin: str | None = None
    pan: str | None = None
    notes: str | None = None
    created_at: dt.datetime | None = None
