from __future__ import annotations

from typing import List, Protocol, Sequence

from models.company_record import CompanyRecord
from models.verification import VerificationAction


class RecordRepoPort(Protocol):
    def all_records(self) -> List[CompanyRecord]:
        """All currently known records, in insertion order."""
        ...


class RecordSinkPort(Protocol):
    def save_records(self, records: Sequence[CompanyRecord]) -> None:
        ...


class VerificationStorePort(Protocol):
    def record(self, record_id: str, field_name: str, action: VerificationAction) -> None:
        ...
