import dataclasses
from typing import Any

from pydantic import BaseModel

from firmdesk.services.etl.columns import EntitySchema
from firmdesk.services.etl.errors import ConversionError
from firmdesk.services.etl.validators import ParseResult


def _present(v: Any) -> bool:
    if v is None:
        return False
    if isinstance(v, str) and not v.strip():
        return False
    return True


def convert_row(row: Any, schema: EntitySchema) -> BaseModel:
    values = {k: v for k, v in dataclasses.asdict(row).items() if _present(v)}
    return schema.create_model(**values)


def convert_rows(rows: list[Any], schema: EntitySchema) -> list[BaseModel]:
    return [convert_row(r, schema) for r in rows]


def convert_result(result: ParseResult, schema: EntitySchema) -> list[BaseModel]:
    # all-or-nothing: one bad row blocks the whole upload
    if result.errors:
        raise ConversionError(f"cannot convert {schema.entity.value} rows: {len(result.errors)} validation error(s)")
    return convert_rows(result.rows, schema)


def payload_dict(payload: BaseModel) -> dict[str, Any]:
    return payload.model_dump(exclude_unset=True)
