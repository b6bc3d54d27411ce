from __future__ import annotations

from typing import Dict, List

from models.verification import VerificationAction, VerificationEvent


class InMemoryVerificationStore:
    """Keeps the latest action per (record, field) plus the full click history."""

    def __init__(self) -> None:
        self._status: Dict[str, Dict[str, VerificationAction]] = {}
        self.events: List[VerificationEvent] = []

    def record(self, record_id: str, field_name: str, action: VerificationAction) -> None:
        event = VerificationEvent(record_id=record_id, field_name=field_name, action=action)
        self.events.append(event)
        self._status.setdefault(record_id, {})[field_name] = action

    def status_for(self, record_id: str) -> Dict[str, VerificationAction]:
        """Field name -> latest action, suitable for a record's verificationStatus."""
        return dict(self._status.get(record_id, {}))

    def is_verified(self, record_id: str, field_name: str) -> bool:
        return self._status.get(record_id, {}).get(field_name) == "verify"
