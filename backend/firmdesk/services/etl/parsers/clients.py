from dataclasses import dataclass

from firmdesk.schemas.clients import ClientCreate
from firmdesk.services.etl.columns import Column, EntitySchema, EntityType

@dataclass
class ClientRow:
    name: str
    gstin: str | None = None
    pan: str | None = None
    notes: str | None = None

CLIENT_SCHEMA = EntitySchema(
    entity=EntityType.client,
    columns=(
        Column("Client Name", "name", required=True, example="Acme Traders"),
        Column("GSTIN", "gstin", example="27AAPFU0939F1ZV"),
        Column("PAN", "pan", example="AAPFU0939F"),
        Column("Notes", "notes", example="Quarterly GST filing"),
    ),
    row_type=ClientRow,
    create_model=ClientCreate,
    template_name="client_upload_template.csv",
)
