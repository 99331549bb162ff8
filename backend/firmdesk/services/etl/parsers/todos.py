from dataclasses import dataclass

from firmdesk.schemas.todos import TodoCreate
from firmdesk.services.etl.columns import Column, EntitySchema, EntityType, FieldKind

@dataclass
class TodoRow:
    title: str
    description: str | None = None
    completed: bool = False
    priority: int | None = None
    due_date: int | None = None

TODO_SCHEMA = EntitySchema(
    entity=EntityType.todo,
    columns=(
        Column("Title", "title", required=True, example="Example Todo"),
        Column("Description", "description", example="Optional description"),
        Column("Completed", "completed", FieldKind.flag, example="false"),
        Column("Priority", "priority", FieldKind.count, example="1", message="Priority must be a positive number"),
        Column("Due Date", "due_date", FieldKind.date, example="2026-03-01"),
    ),
    row_type=TodoRow,
    create_model=TodoCreate,
    epoch_unit="ms",
    template_name="todo_template_{date}.csv",
)
