from __future__ import annotations

import logging
from typing import List, Optional

from models.company_record import CompanyRecord
from pipelines.runner import RunContext
from ports.repos import RecordSinkPort


logger = logging.getLogger(__name__)


class PersistRecords:
    """Hand the run's records to the sink in a single call."""

    def __init__(self, sink: Optional[RecordSinkPort]) -> None:
        self.sink = sink

    def run(self, ctx: RunContext) -> RunContext:
        records: List[CompanyRecord] = ctx.records or []
        if self.sink is None or not records:
            ctx.meta["persisted_records"] = 0
            return ctx
        self.sink.save_records(list(records))
        ctx.meta["persisted_records"] = len(records)
        logger.info(
            "handed %d records to sink",
            len(records),
            extra={"step": "persist_records", "status": "ok", "run_id": ctx.run_id or "-"},
        )
        return ctx
