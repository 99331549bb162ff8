import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel

from firmdesk.services.etl.utils import EpochUnit


class EntityType(str, Enum):
    client = "client"
    task = "task"
    assignee = "assignee"
    todo = "todo"


class FieldKind(str, Enum):
    text = "text"
    choice = "choice"
    date = "date"
    number = "number"
    count = "count"  # non-negative integer
    flag = "flag"


@dataclass(frozen=True)
class Column:
    header: str
    field: str
    kind: FieldKind = FieldKind.text
    required: bool = False
    choices: tuple[str, ...] = ()
    example: str = ""
    # overrides the generated "<header> ..." message
    message: str | None = None


@dataclass(frozen=True)
class EntitySchema:
    entity: EntityType
    columns: tuple[Column, ...]
    row_type: Callable[..., Any]
    create_model: type[BaseModel]
    epoch_unit: EpochUnit = "ms"
    # may contain a {date} placeholder
    template_name: str = ""

    @property
    def headers(self) -> list[str]:
        return [c.header for c in self.columns]

    @property
    def required_headers(self) -> list[str]:
        return [c.header for c in self.columns if c.required]

    @property
    def example_row(self) -> list[str]:
        return [c.example for c in self.columns]

    def blank_value(self, field_name: str) -> Any:
        """What an empty cell parses to: the row type default, or "" for fields without one."""
        for f in dataclasses.fields(self.row_type):
            if f.name == field_name:
                return "" if f.default is dataclasses.MISSING else f.default
        raise KeyError(field_name)

