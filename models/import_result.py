from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .company_record import CompanyRecord


class RowWarning(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ImportResult(BaseModel):
    imported_records: List[CompanyRecord] = Field(default_factory=list, alias="importedRecords")
    processed_count: int = Field(default=0, alias="processedCount")
    skipped_count: int = Field(default=0, alias="skippedCount")
    warnings: List[RowWarning] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
