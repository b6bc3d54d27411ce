from __future__ import annotations

import re
from typing import Any, Iterable, Optional


def _record_id(record: Any) -> Optional[str]:
    if isinstance(record, dict):
        return record.get("id")
    return getattr(record, "id", None)


def id_suffix(record_id: Optional[str], prefix: str) -> Optional[int]:
    """Numeric suffix of 'PREFIX-0042' style ids; None for foreign or malformed ids."""
    if not record_id:
        return None
    m = re.match(rf"^{re.escape(prefix)}-(\d+)$", str(record_id).strip())
    if not m:
        return None
    return int(m.group(1))


def format_record_id(number: int, prefix: str) -> str:
    return f"{prefix}-{number:04d}"


def highest_suffix(records: Iterable[Any], prefix: str) -> int:
    highest = 0
    for rec in records:
        n = id_suffix(_record_id(rec), prefix)
        if n is not None and n > highest:
            highest = n
    return highest


def next_record_id(records: Iterable[Any], prefix: str = "CORP") -> str:
    """Next sequential id after the highest suffix among known records."""
    return format_record_id(highest_suffix(records, prefix) + 1, prefix)

