from dataclasses import dataclass

from firmdesk.schemas.assignees import AssigneeCreate
from firmdesk.services.etl.columns import Column, EntitySchema, EntityType

@dataclass
class AssigneeRow:
    name: str
    captain: str | None = None

# A row without a captain still parses (captain=None) but is flagged, so
# the upload is blocked until the sheet names one.
ASSIGNEE_SCHEMA = EntitySchema(
    entity=EntityType.assignee,
    columns=(
        Column("Team Name", "name", required=True, example="Team Alpha"),
        Column("Captain", "captain", required=True, example="Jordan"),
    ),
    row_type=AssigneeRow,
    create_model=AssigneeCreate,
    template_name="assignee_upload_template.csv",
)
