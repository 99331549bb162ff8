import datetime as dt
import threading
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any

from firmdesk.core.logging import logger


@dataclass
class DiagnosticEntry:
    kind: str
    message: str
    timestamp: dt.datetime
    context: dict[str, Any] = field(default_factory=dict)


class Diagnostics:
    """Error sink for one application instance.

    Built once by ``create_app`` and handed to the call sites that report
    failures (import submission, upload decoding). Entries are kept in a
    bounded ring so a long-lived process does not grow without limit.
    """

    def __init__(self, max_entries: int = 200):
        self._entries: deque[DiagnosticEntry] = deque(maxlen=max_entries)
        self._counts: Counter[str] = Counter()
        self._lock = threading.Lock()
        self.started_at = dt.datetime.now(dt.timezone.utc)

    def report(self, kind: str, message: str, **context: Any) -> DiagnosticEntry:
        entry = DiagnosticEntry(
            kind=kind,
            message=message,
            timestamp=dt.datetime.now(dt.timezone.utc),
            context=context,
        )
        with self._lock:
            self._entries.append(entry)
            self._counts[kind] += 1
        logger.warning("diagnostic_reported", kind=kind, message=message, **context)
        return entry

    def entries(self, kind: str | None = None) -> list[DiagnosticEntry]:
        with self._lock:
            items = list(self._entries)
        if kind is None:
            return items
        return [e for e in items if e.kind == kind]

    def counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._counts.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
