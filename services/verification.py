from __future__ import annotations

import logging
from typing import Literal, Optional

from models.verification import VerificationAction, VerificationEvent
from ports.repos import VerificationStorePort


logger = logging.getLogger(__name__)

ControlState = Literal["idle", "action_chosen"]


class FieldVerificationControl:
    """Verify/flag affordance for one displayed field value.

    Idle -> ActionChosen{verify|flag} -> Idle. Every verify()/flag() call is
    reported to the store exactly once; dismiss() closes the confirmation.
    Only transient state is held here; the store owns verification marks.
    """

    def __init__(
        self,
        record_id: str,
        field_name: str,
        value: str,
        store: VerificationStorePort,
        is_verified: bool = False,
    ) -> None:
        self.record_id = record_id
        self.field_name = field_name
        self.value = value
        self.is_verified = is_verified
        self._store = store
        self.action: Optional[VerificationAction] = None
        self.confirmation_visible = False

    @property
    def state(self) -> ControlState:
        return "action_chosen" if self.confirmation_visible else "idle"

    def verify(self) -> VerificationEvent:
        return self._choose("verify")

    def flag(self) -> VerificationEvent:
        return self._choose("flag")

    def dismiss(self) -> None:
        self.confirmation_visible = False
        self.action = None

    def confirmation(self) -> Optional[VerificationEvent]:
        """What the open confirmation shows, or None when idle."""
        if not self.confirmation_visible or self.action is None:
            return None
        return VerificationEvent(record_id=self.record_id, field_name=self.field_name, action=self.action)

    def _choose(self, action: VerificationAction) -> VerificationEvent:
        self.action = action
        self.confirmation_visible = True
        self._store.record(self.record_id, self.field_name, action)
        logger.info(
            "field %s on %s marked %s",
            self.field_name,
            self.record_id,
            action,
            extra={"step": "verification", "status": action},
        )
        return VerificationEvent(record_id=self.record_id, field_name=self.field_name, action=action)
