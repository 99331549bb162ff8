import datetime as dt

from firmdesk.services.etl.columns import EntitySchema

CSV_MEDIA_TYPE = "text/csv;charset=utf-8;"


def _quote(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_line(values: list[str]) -> str:
    return ",".join(_quote(v) for v in values)


def generate_template(schema: EntitySchema) -> str:
    return "\n".join([format_line(schema.headers), format_line(schema.example_row)])


def template_filename(schema: EntitySchema, today: dt.date | None = None) -> str:
    today = today or dt.date.today()
    return schema.template_name.format(date=today.isoformat())
