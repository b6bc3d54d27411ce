from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from config.settings import Settings, get_settings
from models.company_record import CompanyRecord
from models.import_result import RowWarning
from pipelines.runner import RunContext
from ports.repos import RecordRepoPort
from services.csv_parsing import map_fields
from services.errors import ParseError
from services.record_ids import format_record_id, highest_suffix
from services.record_mapping import convert_to_record


logger = logging.getLogger(__name__)


class ConvertRows:
    def __init__(
        self,
        repo: RecordRepoPort,
        settings: Optional[Settings] = None,
        today: Callable[[], date] = date.today,
        on_progress: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        self.repo = repo
        self.settings = settings or get_settings()
        self.today = today
        self.on_progress = on_progress

    def run(self, ctx: RunContext) -> RunContext:
        settings = self.settings
        prefix = settings.record_id_prefix
        lookup_date = self.today().isoformat()
        # One snapshot of known records per run; ids advance locally from here
        last_number = highest_suffix(self.repo.all_records(), prefix)

        records: List[CompanyRecord] = []
        warnings: List[RowWarning] = []
        processed = 0
        skipped = 0

        for line_no, line in ctx.rows:
            if not line.strip():
                skipped += 1
                self._progress(processed, skipped)
                continue

            data = map_fields(ctx.headers, line, settings.csv_quoting)
            try:
                record = convert_to_record(
                    data,
                    format_record_id(last_number + 1, prefix),
                    lookup_date,
                    settings=settings,
                    row=line_no,
                )
            except ParseError as e:
                if settings.cell_error_policy == "abort":
                    logger.error(
                        "row %d aborted the import: %s",
                        line_no,
                        e,
                        extra={"step": "convert_rows", "status": "failed", "error": type(e).__name__, "run_id": ctx.run_id or "-"},
                    )
                    raise
                warnings.append(RowWarning(row=line_no, column=e.column, issue="invalid_images_json", value=e.value, action="row_skipped"))
                logger.warning(
                    "row %d skipped: %s",
                    line_no,
                    e,
                    extra={"step": "convert_rows", "status": "skipped", "error": type(e).__name__, "run_id": ctx.run_id or "-"},
                )
                skipped += 1
                self._progress(processed, skipped)
                continue

            if record is None:
                skipped += 1
            else:
                last_number += 1
                records.append(record)
                processed += 1
            self._progress(processed, skipped)

        ctx.records = records
        ctx.warnings.extend(warnings)
        ctx.meta["processed_count"] = processed
        ctx.meta["skipped_count"] = skipped
        logger.info(
            "converted %d rows, skipped %d",
            processed,
            skipped,
            extra={"step": "convert_rows", "status": "ok", "run_id": ctx.run_id or "-"},
        )
        return ctx

    def _progress(self, processed: int, skipped: int) -> None:
        if self.on_progress:
            self.on_progress(processed, skipped)
