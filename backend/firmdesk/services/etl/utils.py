import datetime as dt
import hashlib
import math
from typing import Any, Literal

EpochUnit = Literal["ms", "ns"]

DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y")

_EPOCH = dt.date(1970, 1, 1)
_UNIT_PER_DAY = {
    "ms": 86_400 * 1_000,
    "ns": 86_400 * 1_000_000_000,
}

# signed 64-bit, the range of the BigInteger date columns
EPOCH_MIN = -(2**63)
EPOCH_MAX = 2**63 - 1

def text_sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()

def norm_str(v: Any) -> str | None:
    if v is None:
        return None
    if isinstance(v, str):
        s = v.strip()
        return s if s else None
    return str(v).strip()

def to_date(v: Any) -> dt.date | None:
    if v is None:
        return None
    if isinstance(v, dt.datetime):
        return v.date()
    if isinstance(v, dt.date):
        return v
    if isinstance(v, str):
        s = v.strip()
        for fmt in DATE_FORMATS:
            try:
                return dt.datetime.strptime(s, fmt).date()
            except ValueError:
                pass
        # full ISO timestamps, e.g. 2026-03-01T09:30:00
        try:
            return dt.datetime.fromisoformat(s).date()
        except ValueError:
            return None
    return None

def to_epoch(d: dt.date, unit: EpochUnit) -> int:
    """Midnight UTC of ``d`` as an integer epoch value in ``unit``."""
    return (d - _EPOCH).days * _UNIT_PER_DAY[unit]

def epoch_in_range(value: int) -> bool:
    return EPOCH_MIN <= value <= EPOCH_MAX

def to_float_nullable(v: Any) -> float | None:
    if v is None:
        return None
    if isinstance(v, (int, float)):
        f = float(v)
    else:
        s = str(v).strip().replace(" ", "").replace(",", "").replace("₹", "")
        if not s:
            return None
        try:
            f = float(s)
        except ValueError:
            return None
    return f if math.isfinite(f) else None

def to_count_nullable(v: Any) -> int | None:
    s = norm_str(v)
    if s is None:
        return None
    try:
        n = int(s)
    except ValueError:
        return None
    return n if n >= 0 else None

def to_flag(v: Any, default: bool = False) -> bool:
    s = norm_str(v)
    if s is None:
        return default
    return s.lower() in ("true", "1", "yes")

def header_to_index(header: list[Any]) -> dict[str, int]:
    m = {}
    for i, v in enumerate(header):
        if isinstance(v, str) and v.strip():
            m.setdefault(v.strip(), i)
    return m
