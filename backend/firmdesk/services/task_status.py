ALLOWED_TASK_STATUSES: tuple[str, ...] = (
    "Pending",
    "Docs Pending",
    "In Progress",
    "Checking",
    "Payment Pending",
    "Completed",
    "Hold",
)

# older records and exports still carry these
LEGACY_STATUS_MAP = {
    "To Do": "Pending",
    "Done": "Completed",
    "Blocked": "Hold",
}


def normalize_status(status: str | None) -> str:
    if status is None or not status.strip():
        return ""
    s = status.strip()
    return LEGACY_STATUS_MAP.get(s, s)


def is_valid_status(status: str | None) -> bool:
    normalized = normalize_status(status)
    return bool(normalized) and normalized in ALLOWED_TASK_STATUSES
