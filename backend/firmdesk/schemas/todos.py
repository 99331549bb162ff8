from pydantic import BaseModel, Field

class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=512)
    description: str | None = None
    completed: bool = False
    priority: int | None = Field(default=None, ge=0)
    due_date: int | None = None  # epoch milliseconds

class TodoUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=512)
    description: str | None = None
    completed: bool | None = None
    priority: int | None = Field(default=None, ge=0)
    due_date: int | None = None

class TodoOut(BaseModel):
    id: int
    title: str
    description: str | None = None
    completed: bool
    priority: int | None = None
    due_date: int | None = None
