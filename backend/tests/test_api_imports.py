from firmdesk.core.deps import get_store
from firmdesk.main import app
from firmdesk.services.store import RecordStore

from conftest import csv_file

class FlakyStore(RecordStore):
    """Fails every create whose payload name is in ``bad``."""

    def __init__(self, session_factory, bad):
        super().__init__(session_factory)
        self.bad = set(bad)

    def create(self, entity, payload):
        if getattr(payload, "name", None) in self.bad:
            raise RuntimeError(f"cannot store {payload.name}")
        return super().create(entity, payload)

def test_template_download(client):
    r = client.get("/imports/task/template")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert 'filename="task_upload_template.csv"' in r.headers["content-disposition"]
    header = r.text.split("\n")[0]
    assert header.startswith("Client Name,Task Category,Sub Category,Status")

def test_todo_template_name_is_dated(client):
    r = client.get("/imports/todo/template")
    assert r.status_code == 200
    assert "todo_template_" in r.headers["content-disposition"]

def test_unknown_entity_is_rejected(client):
    r = client.get("/imports/invoice/template")
    assert r.status_code == 422

def test_preview_reports_row_errors(client):
    r = client.post("/imports/assignee/preview", files=csv_file("Team Name,Captain\nAlpha,Jordan\nBeta,\n"))
    assert r.status_code == 200
    body = r.json()
    assert body["rows"] == [{"name": "Alpha", "captain": "Jordan"}, {"name": "Beta", "captain": None}]
    assert body["errors"] == [{"row": 3, "column": "Captain", "message": "Captain is required"}]
    # preview never writes
    assert client.get("/assignees").json() == []
    assert client.get("/imports").json() == []

def test_successful_import(client):
    text = "Client Name,GSTIN\nAcme,27AAPFU0939F1ZV\n\nBeta Traders,\n"
    r = client.post("/imports/client", files=csv_file(text, "clients.csv"))
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "success"
    assert (body["submitted"], body["succeeded"], body["failed"]) == (2, 2, 0)
    assert [x["row"] for x in body["results"]] == [2, 3]

    names = client.get("/clients/names").json()
    assert names == ["Acme", "Beta Traders"]

    runs = client.get("/imports", params={"entity": "client"}).json()
    assert len(runs) == 1
    assert runs[0]["status"] == "success"
    assert runs[0]["file_name"] == "clients.csv"
    assert runs[0]["rows_total"] == 2 and runs[0]["rows_loaded"] == 2

def test_rows_with_errors_block_the_whole_upload(client):
    r = client.post("/imports/assignee", files=csv_file("Team Name,Captain\nAlpha,Jordan\nBeta,\n"))
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["errors"] == [{"row": 3, "column": "Captain", "message": "Captain is required"}]
    assert client.get("/assignees").json() == []

    run_id = detail["import_run_id"]
    runs = client.get("/imports").json()
    assert runs[0]["id"] == run_id and runs[0]["status"] == "rejected"
    errs = client.get(f"/imports/{run_id}/errors").json()
    assert [(e["stage"], e["row_num"], e["column"], e["message"]) for e in errs] == [
        ("parse", 3, "Captain", "Captain is required")
    ]

def test_header_only_file_is_rejected(client):
    r = client.post("/imports/client", files=csv_file("Client Name,GSTIN\n"))
    assert r.status_code == 422
    assert r.json()["detail"]["errors"][0]["message"] == "CSV file has no data rows"

def test_task_import_stores_nanosecond_dates(client):
    text = (
        "Client Name,Task Category,Sub Category,Status,Due Date\n"
        "Acme,GST,Monthly Return,In Progress,1970-01-02\n"
    )
    r = client.post("/imports/task", files=csv_file(text))
    assert r.status_code == 200
    tasks = client.get("/tasks").json()
    assert tasks[0]["due_date"] == 86_400 * 10**9
    assert tasks[0]["status"] == "In Progress"

def test_csv_does_not_accept_legacy_status(client):
    text = "Client Name,Task Category,Sub Category,Status\nAcme,GST,Monthly Return,Done\n"
    r = client.post("/imports/task", files=csv_file(text))
    assert r.status_code == 422
    assert r.json()["detail"]["errors"][0]["column"] == "Status"

def test_todo_import_stores_millisecond_dates(client):
    text = "Title,Completed,Priority,Due Date\nFile ITR,yes,2,1970-01-02\n"
    r = client.post("/imports/todo", files=csv_file(text))
    assert r.status_code == 200
    todo = client.get("/todos").json()[0]
    assert todo["due_date"] == 86_400 * 1000
    assert todo["completed"] is True
    assert todo["priority"] == 2

def test_partial_import_keeps_stored_rows(client, session_factory):
    app.dependency_overrides[get_store] = lambda: FlakyStore(session_factory, {"Beta"})
    text = "Team Name,Captain\nAlpha,Jordan\nBeta,Sam\nGamma,Lee\n"
    r = client.post("/imports/assignee", files=csv_file(text))
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "partial"
    assert [(x["row"], x["ok"]) for x in body["results"]] == [(2, True), (3, False), (4, True)]
    assert body["results"][1]["error"] == "cannot store Beta"

    assert client.get("/assignees/names").json() == ["Alpha", "Gamma"]

    run_id = body["import_run_id"]
    errs = client.get(f"/imports/{run_id}/errors").json()
    assert [(e["stage"], e["row_num"], e["column"]) for e in errs] == [("submit", 3, "Submit")]

    report = client.get("/diagnostics", params={"kind": "import_row_failed"}).json()
    assert report["counts"]["import_row_failed"] == 1
    assert report["entries"][0]["context"]["row"] == 3

def test_non_csv_upload_is_rejected_and_reported(client):
    r = client.post("/imports/client", files=csv_file("x", "clients.xlsx"))
    assert r.status_code == 400
    report = client.get("/diagnostics").json()
    assert report["counts"] == {"upload_rejected": 1}
    assert report["entries"][0]["context"]["file_name"] == "clients.xlsx"

def test_oversized_upload(client, monkeypatch):
    from firmdesk.core.config import settings

    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 10)
    r = client.post("/imports/client", files=csv_file("Client Name\nAcme Traders\n"))
    assert r.status_code == 413

def test_errors_for_missing_run(client):
    assert client.get("/imports/999/errors").status_code == 404

def test_diagnostics_clear(client):
    client.post("/imports/client/preview", files=csv_file("x", "a.txt"))
    assert client.get("/diagnostics").json()["counts"] == {"upload_rejected": 1}
    assert client.delete("/diagnostics").status_code == 200
    assert client.get("/diagnostics").json()["entries"] == []

def test_overlong_field_is_rejected_before_submit(client):
    text = "Client Name,GSTIN\nAcme," + "X" * 40 + "\n"
    preview = client.post("/imports/client/preview", files=csv_file(text)).json()
    assert preview["errors"] == [{"row": 2, "column": "GSTIN", "message": "GSTIN must be at most 32 characters"}]

    r = client.post("/imports/client", files=csv_file(text))
    assert r.status_code == 422
    assert r.json()["detail"]["errors"] == preview["errors"]
    assert client.get("/imports").json()[0]["status"] == "rejected"
    assert client.get("/clients").json() == []

def test_out_of_range_task_date_is_rejected(client):
    text = "Client Name,Task Category,Sub Category,Due Date\nAcme,GST,Audit,2300-01-01\n"
    r = client.post("/imports/task", files=csv_file(text))
    assert r.status_code == 422
    assert r.json()["detail"]["errors"][0]["column"] == "Due Date"

def test_diagnostics_reports_retained_entries(client):
    client.post("/imports/client/preview", files=csv_file("x", "a.txt"))
    client.post("/imports/client/preview", files=csv_file("x", "b.txt"))
    assert client.get("/diagnostics", params={"limit": 1}).json()["retained"] == 2
