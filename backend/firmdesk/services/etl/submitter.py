from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel

from firmdesk.core.diagnostics import Diagnostics
from firmdesk.core.logging import logger
from firmdesk.services.etl.errors import BulkSubmissionError


@dataclass
class RowOutcome:
    index: int
    row: int | None
    ok: bool
    record_id: int | None = None
    error: str | None = None


@dataclass
class BulkOutcome:
    entity: str
    results: list[RowOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[RowOutcome]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[RowOutcome]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def status(self) -> str:
        if not self.failed:
            return "success"
        if not self.succeeded:
            return "failed"
        return "partial"

    def raise_for_failures(self) -> None:
        if self.failed:
            raise BulkSubmissionError(self)


class BulkSubmitter:
    """Submits one create call per payload and records each row's fate.

    Rows that were stored before another row failed stay stored; callers
    use the per-row results to retry only what failed.
    """

    def __init__(
        self,
        entity: str,
        create: Callable[[BaseModel], int],
        max_workers: int = 8,
        diagnostics: Diagnostics | None = None,
    ):
        self.entity = entity
        self.create = create
        self.max_workers = max(1, max_workers)
        self.diagnostics = diagnostics

    def submit(self, payloads: list[BaseModel], row_numbers: list[int] | None = None) -> BulkOutcome:
        outcome = BulkOutcome(entity=self.entity)
        if not payloads:
            return outcome
        rows: list[Any] = list(row_numbers) if row_numbers is not None else [None] * len(payloads)

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(payloads))) as pool:
            futures = [pool.submit(self.create, p) for p in payloads]
            for i, fut in enumerate(futures):
                try:
                    record_id = fut.result()
                except Exception as e:
                    outcome.results.append(RowOutcome(index=i, row=rows[i], ok=False, error=str(e) or type(e).__name__))
                    logger.exception("import_row_failed", entity=self.entity, index=i, row=rows[i], error=str(e))
                    if self.diagnostics is not None:
                        self.diagnostics.report(
                            "import_row_failed",
                            f"{self.entity} row {rows[i] if rows[i] is not None else i + 1} failed: {e}",
                            entity=self.entity,
                            row=rows[i],
                        )
                else:
                    outcome.results.append(RowOutcome(index=i, row=rows[i], ok=True, record_id=record_id))

        logger.info(
            "import_submitted",
            entity=self.entity,
            submitted=len(payloads),
            succeeded=len(outcome.succeeded),
            failed=len(outcome.failed),
        )
        return outcome
