from dataclasses import dataclass

from firmdesk.schemas.tasks import TaskCreate
from firmdesk.services.etl.columns import Column, EntitySchema, EntityType, FieldKind
from firmdesk.services.task_status import ALLOWED_TASK_STATUSES

@dataclass
class TaskRow:
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

TASK_SCHEMA = EntitySchema(
    entity=EntityType.task,
    columns=(
        Column("Client Name", "client_name", required=True, example="Acme Traders"),
        Column("Task Category", "task_category", required=True, example="GST"),
        Column("Sub Category", "sub_category", required=True, example="Monthly Return"),
        Column("Status", "status", FieldKind.choice, choices=ALLOWED_TASK_STATUSES, example="Pending"),
        Column("Comment", "comment", example="Awaiting purchase register"),
        Column("Assigned Name", "assigned_name", example="Team Alpha"),
        Column("Due Date", "due_date", FieldKind.date, example="2026-03-31"),
        Column("Assignment Date", "assignment_date", FieldKind.date, example="2026-03-01"),
        Column("Completion Date", "completion_date", FieldKind.date),
        Column("Bill", "bill", FieldKind.number, example="15000"),
        Column("Advance Received", "advance_received", FieldKind.number, example="5000"),
        Column("Outstanding Amount", "outstanding_amount", FieldKind.number, example="10000"),
        Column("Payment Status", "payment_status", example="Partially Paid"),
    ),
    row_type=TaskRow,
    create_model=TaskCreate,
    epoch_unit="ns",
    template_name="task_upload_template.csv",
)
