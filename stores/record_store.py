from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from models.company_record import CompanyRecord
from services.errors import ReadError


class InMemoryRecordStore:
    """Record repository and sink backed by a plain list (insertion order)."""

    def __init__(self, records: Optional[Iterable[CompanyRecord]] = None):
        self._records: List[CompanyRecord] = list(records or [])

    def all_records(self) -> List[CompanyRecord]:
        return list(self._records)

    def save_records(self, records: Sequence[CompanyRecord]) -> None:
        self._records.extend(records)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryRecordStore":
        """Seed a store from a JSON array (or {"records": [...]}) of camelCase records."""
        try:
            data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ReadError(f"Failed to read existing records from {path}: {e}") from e
        if isinstance(data, dict):
            data = data.get("records") or []
        if not isinstance(data, list):
            raise ReadError(f"Existing records in {path} must be a JSON array")
        items: List[Dict[str, Any]] = [d for d in data if isinstance(d, dict)]
        try:
            return cls([CompanyRecord.model_validate(d) for d in items])
        except ValidationError as e:
            raise ReadError(f"Existing records in {path} are not valid company records: {e.error_count()} errors") from e
