from typing import Any

from pydantic import ValidationError as ModelValidationError

from firmdesk.services.etl.columns import Column, EntitySchema, FieldKind
from firmdesk.services.etl.converter import convert_row
from firmdesk.services.etl.tokenizer import is_blank, is_empty_row, split_lines, tokenize_line
from firmdesk.services.etl.utils import (
    epoch_in_range,
    header_to_index,
    norm_str,
    to_count_nullable,
    to_date,
    to_epoch,
    to_flag,
    to_float_nullable,
)
from firmdesk.services.etl.validators import ParseResult, ValidationError, file_error


def _parse_value(col: Column, raw: str, schema: EntitySchema) -> tuple[Any, str | None]:
    """Returns (value, error message)."""
    s = norm_str(raw)

    if col.kind == FieldKind.flag:
        return to_flag(s), None

    if s is None:
        if col.required:
            return schema.blank_value(col.field), col.message or f"{col.header} is required"
        return None, None

    if col.kind == FieldKind.text:
        return s, None

    if col.kind == FieldKind.choice:
        if s not in col.choices:
            return s, col.message or f"{col.header} must be one of: {', '.join(col.choices)}"
        return s, None

    if col.kind == FieldKind.date:
        d = to_date(s)
        if d is None:
            return None, col.message or f"Invalid {col.header.lower()} format (use YYYY-MM-DD)"
        epoch = to_epoch(d, schema.epoch_unit)
        if not epoch_in_range(epoch):
            return None, f"Invalid {col.header.lower()}: {d.isoformat()} is out of range"
        return epoch, None

    if col.kind == FieldKind.number:
        f = to_float_nullable(s)
        if f is None:
            return None, col.message or f"{col.header} must be a valid number"
        return f, None

    if col.kind == FieldKind.count:
        n = to_count_nullable(s)
        if n is None:
            return None, col.message or f"{col.header} must be a non-negative whole number"
        return n, None

    raise ValueError(f"unknown field kind {col.kind!r}")


def _model_message(col: Column, err: dict[str, Any]) -> str:
    ctx = err.get("ctx") or {}
    if err["type"] == "string_too_long":
        return f"{col.header} must be at most {ctx['max_length']} characters"
    return f"{col.header}: {err['msg']}"


def _model_errors(row: Any, schema: EntitySchema, row_num: int, flagged: set[str]) -> list[ValidationError]:
    """Checks the row against the store's create model.

    Columns already flagged by the per-column rules are not reported twice.
    """
    try:
        convert_row(row, schema)
    except ModelValidationError as e:
        by_field = {c.field: c for c in schema.columns}
        out = []
        for err in e.errors():
            col = by_field.get(str(err["loc"][0])) if err["loc"] else None
            if col is None or col.header in flagged:
                continue
            flagged.add(col.header)
            out.append(ValidationError(row=row_num, column=col.header, message=_model_message(col, err)))
        return out
    return []


def parse_csv(text: str, schema: EntitySchema, strict_quotes: bool = False) -> ParseResult:
    """Tokenize and validate one upload for ``schema``.

    Per-row problems come back as ``ValidationError`` entries next to the
    best-effort parsed row; only file-level problems stop the pass early.
    Row numbers count non-blank lines with the header as row 1.
    """
    result = ParseResult()
    lines = split_lines(text)
    content = [ln for ln in lines if not is_blank(ln)]

    if not content:
        result.errors.append(file_error("CSV file is empty"))
        return result

    header = tokenize_line(content[0], strict=strict_quotes)
    index = header_to_index(header)
    missing = [h for h in schema.required_headers if h not in index]
    if missing:
        result.errors.append(file_error(f"Missing required column(s): {', '.join(missing)}", row=1))
        return result

    result.skipped = len(lines) - len(content)

    for offset, line in enumerate(content[1:]):
        row_num = offset + 2
        values = tokenize_line(line, strict=strict_quotes)
        if is_empty_row(values):
            result.skipped += 1
            continue

        parsed: dict[str, Any] = {}
        for col in schema.columns:
            i = index.get(col.header)
            raw = values[i] if i is not None and i < len(values) else ""
            value, message = _parse_value(col, raw, schema)
            parsed[col.field] = value
            if message:
                result.errors.append(ValidationError(row=row_num, column=col.header, message=message))

        row = schema.row_type(**parsed)
        flagged = {e.column for e in result.errors_for(row_num)}
        result.errors.extend(_model_errors(row, schema, row_num, flagged))
        result.rows.append(row)
        result.row_numbers.append(row_num)

    return result
