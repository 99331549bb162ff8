from firmdesk.services.etl.csv_parser import parse_csv
from firmdesk.services.etl.parsers import ASSIGNEE_SCHEMA, CLIENT_SCHEMA, TASK_SCHEMA, TODO_SCHEMA
from firmdesk.services.etl.parsers.assignees import AssigneeRow
from firmdesk.services.etl.validators import ValidationError

TASK_HEADER = (
    "Client Name,Task Category,Sub Category,Status,Comment,Assigned Name,Due Date,"
    "Assignment Date,Completion Date,Bill,Advance Received,Outstanding Amount,Payment Status"
)

def test_assignee_missing_captain_is_flagged_but_kept():
    res = parse_csv("Team Name,Captain\nAlpha,Jordan\nBeta,\n", ASSIGNEE_SCHEMA)
    assert res.rows == [AssigneeRow(name="Alpha", captain="Jordan"), AssigneeRow(name="Beta", captain=None)]
    assert res.errors == [ValidationError(row=3, column="Captain", message="Captain is required")]
    assert res.row_numbers == [2, 3]

def test_empty_file_is_a_file_level_error():
    res = parse_csv("  \n\n", CLIENT_SCHEMA)
    assert res.rows == []
    assert len(res.errors) == 1
    assert res.errors[0].is_file_level
    assert res.errors[0].message == "CSV file is empty"

def test_missing_required_header_aborts_before_rows():
    res = parse_csv("Client Name,Status\nAcme,Pending\n", TASK_SCHEMA)
    assert res.rows == []
    assert len(res.errors) == 1
    err = res.errors[0]
    assert err.is_file_level
    assert "Task Category" in err.message and "Sub Category" in err.message

def test_optional_column_absent_from_header_reads_empty():
    res = parse_csv("PAN,Client Name\nAAPFU0939F,Acme\n", CLIENT_SCHEMA)
    assert res.errors == []
    row = res.rows[0]
    assert row.name == "Acme"
    assert row.pan == "AAPFU0939F"
    assert row.gstin is None and row.notes is None

def test_required_field_blank_gives_one_error_per_field():
    res = parse_csv("Client Name,GSTIN\n  ,27AAPFU0939F1ZV\n", CLIENT_SCHEMA)
    assert [(e.row, e.column) for e in res.errors] == [(2, "Client Name")]
    assert res.rows[0].name == ""

def test_whitespace_only_rows_are_neither_rows_nor_errors():
    text = "Client Name,GSTIN\nAcme,\n , \n\n,\nBeta,X\n"
    res = parse_csv(text, CLIENT_SCHEMA)
    assert [r.name for r in res.rows] == ["Acme", "Beta"]
    assert res.errors == []

def test_row_count_plus_skipped_equals_non_header_lines():
    text = "\nClient Name,GSTIN\nAcme,\n\n , \n,\nBeta,X\n"
    res = parse_csv(text, CLIENT_SCHEMA)
    total_non_header = len(text.split("\n")) - 1
    assert len(res.rows) + res.skipped == total_non_header

def test_task_unknown_status_keeps_raw_value():
    res = parse_csv(TASK_HEADER + "\nAcme,GST,Monthly Return,Unknown,,,,,,,,,\n", TASK_SCHEMA)
    assert len(res.errors) == 1
    assert res.errors[0].column == "Status"
    assert res.rows[0].status == "Unknown"

def test_task_dates_and_amounts():
    line = 'Acme,GST,Monthly Return,In Progress,"Needs docs, urgent",Team Alpha,2026-03-31,01.03.2026,,"15,000",5000,10000,Partially Paid'
    res = parse_csv(TASK_HEADER + "\n" + line, TASK_SCHEMA)
    assert res.errors == []
    row = res.rows[0]
    assert row.comment == "Needs docs, urgent"
    # 2026-03-31 is 20543 days after the epoch
    assert row.due_date == 20543 * 86_400 * 10**9
    assert row.assignment_date == 20513 * 86_400 * 10**9
    assert row.completion_date is None
    assert row.bill == 15000.0
    assert row.advance_received == 5000.0
    assert row.payment_status == "Partially Paid"

def test_task_bad_numbers_and_dates():
    res = parse_csv(TASK_HEADER + "\nAcme,GST,Audit,,,,notadate,,,abc,12,nan,\n", TASK_SCHEMA)
    cols = sorted(e.column for e in res.errors)
    assert cols == ["Bill", "Due Date", "Outstanding Amount"]
    row = res.rows[0]
    assert row.due_date is None
    assert row.bill is None
    assert row.advance_received == 12.0

def test_empty_date_is_not_an_error():
    res = parse_csv("Title,Due Date\nFile ITR,\n", TODO_SCHEMA)
    assert res.errors == []
    assert res.rows[0].due_date is None

def test_todo_unparseable_date_gives_exactly_one_error():
    res = parse_csv("Title,Due Date\nFile ITR,notadate\n", TODO_SCHEMA)
    assert res.errors == [ValidationError(row=2, column="Due Date", message="Invalid due date format (use YYYY-MM-DD)")]

def test_todo_fields():
    text = "Title,Description,Completed,Priority,Due Date\nA,,YES,0,2026-03-01\nB,desc,,-2,\nC,,no,x,\n"
    res = parse_csv(text, TODO_SCHEMA)
    a, b, c = res.rows
    assert a.completed is True and a.priority == 0
    assert a.due_date == 20513 * 86_400 * 1000
    assert b.completed is False and b.priority is None
    assert c.completed is False
    assert [(e.row, e.message) for e in res.errors] == [
        (3, "Priority must be a positive number"),
        (4, "Priority must be a positive number"),
    ]

def test_todo_missing_title():
    res = parse_csv("Title,Priority\n,3\n", TODO_SCHEMA)
    assert res.errors == [ValidationError(row=2, column="Title", message="Title is required")]
    assert res.rows[0].title == ""
    assert res.rows[0].priority == 3

def test_row_numbers_skip_blank_lines():
    res = parse_csv("Team Name,Captain\n\nAlpha,\n", ASSIGNEE_SCHEMA)
    # blank lines do not take a row number
    assert res.errors[0].row == 2

def test_store_length_limits_are_row_errors():
    res = parse_csv("Client Name,GSTIN\nAcme," + "X" * 40 + "\n", CLIENT_SCHEMA)
    assert res.errors == [ValidationError(row=2, column="GSTIN", message="GSTIN must be at most 32 characters")]
    assert res.rows[0].gstin == "X" * 40

def test_length_check_does_not_repeat_column_errors():
    long_name = "A" * 300
    res = parse_csv(TASK_HEADER + f"\n{long_name},GST,,Unknown,,,,,,,,,\n", TASK_SCHEMA)
    assert sorted(e.column for e in res.errors) == ["Client Name", "Status", "Sub Category"]
    by_col = {e.column: e.message for e in res.errors}
    assert by_col["Client Name"] == "Client Name must be at most 256 characters"
    assert by_col["Sub Category"] == "Sub Category is required"

def test_task_date_past_nanosecond_range():
    res = parse_csv(TASK_HEADER + "\nAcme,GST,Audit,,,,2300-01-01,2262-04-10,,,,,\n", TASK_SCHEMA)
    assert res.errors == [ValidationError(row=2, column="Due Date", message="Invalid due date: 2300-01-01 is out of range")]
    assert res.rows[0].due_date is None
    assert res.rows[0].assignment_date is not None

def test_todo_far_dates_fit_in_milliseconds():
    res = parse_csv("Title,Due Date\nA,2300-01-01\n", TODO_SCHEMA)
    assert res.errors == []
