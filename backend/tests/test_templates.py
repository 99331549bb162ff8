import datetime as dt

import pytest

from firmdesk.services.etl.converter import convert_result
from firmdesk.services.etl.csv_parser import parse_csv
from firmdesk.services.etl.parsers import SCHEMAS, get_schema
from firmdesk.services.etl.templates import format_line, generate_template, template_filename

@pytest.mark.parametrize("entity", list(SCHEMAS))
def test_template_parses_back_cleanly(entity):
    schema = SCHEMAS[entity]
    text = generate_template(schema)
    res = parse_csv(text, schema)
    assert res.errors == []
    assert len(res.rows) == 1
    assert len(convert_result(res, schema)) == 1

def test_template_has_header_then_example():
    lines = generate_template(get_schema("assignee")).split("\n")
    assert lines == ["Team Name,Captain", lines[1]]
    assert lines[1].count(",") == 1

def test_format_line_quotes_commas_and_quotes():
    assert format_line(["a", "b,c", 'say "hi"']) == 'a,"b,c","say ""hi"""'

def test_template_filenames():
    today = dt.date(2026, 3, 1)
    assert template_filename(get_schema("todo"), today) == "todo_template_2026-03-01.csv"
    assert template_filename(get_schema("task"), today) == "task_upload_template.csv"
    assert template_filename(get_schema("client"), today) == "client_upload_template.csv"
