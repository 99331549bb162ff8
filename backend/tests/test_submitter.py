import pytest
from pydantic import BaseModel

from firmdesk.core.diagnostics import Diagnostics
from firmdesk.services.etl.errors import BulkSubmissionError
from firmdesk.services.etl.submitter import BulkSubmitter

class Item(BaseModel):
    name: str

def _create_failing_on(bad: str):
    created = []

    def create(payload: Item) -> int:
        if payload.name == bad:
            raise RuntimeError("duplicate name")
        created.append(payload.name)
        return len(created)

    return create, created

def test_one_failure_does_not_undo_the_others():
    create, created = _create_failing_on("b")
    diagnostics = Diagnostics()
    outcome = BulkSubmitter("client", create, max_workers=1, diagnostics=diagnostics).submit(
        [Item(name="a"), Item(name="b"), Item(name="c")], row_numbers=[2, 3, 4]
    )

    assert created == ["a", "c"]
    assert [(r.row, r.ok) for r in outcome.results] == [(2, True), (3, False), (4, True)]
    assert outcome.results[1].error == "duplicate name"
    assert outcome.status == "partial"
    assert not outcome.ok

    entries = diagnostics.entries("import_row_failed")
    assert len(entries) == 1
    assert entries[0].context["row"] == 3

    with pytest.raises(BulkSubmissionError) as exc:
        outcome.raise_for_failures()
    assert "1 of 3 client rows" in str(exc.value)

def test_results_keep_input_order_with_many_workers():
    create, _ = _create_failing_on("never")
    items = [Item(name=str(i)) for i in range(20)]
    outcome = BulkSubmitter("todo", create, max_workers=4).submit(items)
    assert [r.index for r in outcome.results] == list(range(20))
    assert outcome.status == "success"
    assert all(r.ok and r.record_id for r in outcome.results)
    outcome.raise_for_failures()

def test_all_failing_is_failed_status():
    create, _ = _create_failing_on("x")
    outcome = BulkSubmitter("task", create).submit([Item(name="x")])
    assert outcome.status == "failed"
    assert outcome.results[0].row is None

def test_nothing_to_submit():
    outcome = BulkSubmitter("task", lambda p: 1).submit([])
    assert outcome.results == []
    assert outcome.status == "success"
