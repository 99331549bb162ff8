from dataclasses import dataclass, field
from typing import Any

FILE_COLUMN = "File"

@dataclass
class ValidationError:
    row: int
    column: str
    message: str

    @property
    def is_file_level(self) -> bool:
        return self.column == FILE_COLUMN

@dataclass
class ParseResult:
    rows: list[Any] = field(default_factory=list)
    row_numbers: list[int] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors and bool(self.rows)

    def errors_for(self, row_num: int) -> list[ValidationError]:
        return [e for e in self.errors if e.row == row_num]

def file_error(message: str, row: int = 0, column: str = FILE_COLUMN) -> ValidationError:
    return ValidationError(row=row, column=column, message=message)
