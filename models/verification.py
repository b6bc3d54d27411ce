from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


VerificationAction = Literal["verify", "flag"]


class VerificationEvent(BaseModel):
    """One user click on a field's verify/flag affordance."""

    record_id: str = Field(alias="recordId")
    field_name: str = Field(alias="fieldName")
    action: VerificationAction

    model_config = ConfigDict(frozen=True, populate_by_name=True)
