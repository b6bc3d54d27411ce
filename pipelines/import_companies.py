from __future__ import annotations

import logging
import threading
import time
import uuid
from datetime import date
from typing import Callable, Optional

from config.settings import Settings, get_settings
from models.import_result import ImportResult
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.convert_rows import ConvertRows
from pipelines.steps.persist_records import PersistRecords
from pipelines.steps.read_csv import ReadCsv
from ports.repos import RecordRepoPort, RecordSinkPort
from services.csv_parsing import CsvSource
from services.errors import CsvImportError, ImportInProgressError


logger = logging.getLogger(__name__)


class CsvImporter:
    """Bulk import of company rows from a CSV file.

    The repository is only read, once per run, to find the highest known
    record id. Finished records go to the sink. One run may be in flight per
    importer; a concurrent call raises ImportInProgressError.

    Ids are unique with respect to the repository snapshot taken at the start
    of each run. Two importers sharing a repository can still hand out the
    same id when their runs overlap.
    """

    def __init__(
        self,
        repo: RecordRepoPort,
        sink: Optional[RecordSinkPort] = None,
        settings: Optional[Settings] = None,
        today: Callable[[], date] = date.today,
        on_progress: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        self.repo = repo
        self.sink = sink
        self.settings = settings or get_settings()
        self.today = today
        self.on_progress = on_progress
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def import_file(self, source: CsvSource) -> ImportResult:
        if not self._in_flight.acquire(blocking=False):
            raise ImportInProgressError("An import is already being processed")
        run_id = uuid.uuid4().hex
        started = time.monotonic()
        try:
            ctx = RunContext(source=source, run_id=run_id)
            pipeline = Pipeline([
                ReadCsv(self.settings.required_column, quoting=self.settings.csv_quoting),
                ConvertRows(self.repo, settings=self.settings, today=self.today, on_progress=self.on_progress),
                PersistRecords(self.sink),
            ])
            ctx = pipeline.run(ctx)
        except CsvImportError as e:
            logger.error(
                "import failed: %s",
                e,
                extra={
                    "step": "import",
                    "status": "failed",
                    "error": type(e).__name__,
                    "duration_ms": int((time.monotonic() - started) * 1000),
                    "run_id": run_id,
                },
            )
            raise
        finally:
            self._in_flight.release()

        result = ImportResult(
            imported_records=list(ctx.records),
            processed_count=int(ctx.meta.get("processed_count") or 0),
            skipped_count=int(ctx.meta.get("skipped_count") or 0),
            warnings=list(ctx.warnings),
        )
        logger.info(
            "imported %d companies (%d rows skipped)",
            result.processed_count,
            result.skipped_count,
            extra={
                "step": "import",
                "status": "ok",
                "duration_ms": int((time.monotonic() - started) * 1000),
                "run_id": run_id,
            },
        )
        return result


def import_companies(
    source: CsvSource,
    repo: RecordRepoPort,
    sink: Optional[RecordSinkPort] = None,
    settings: Optional[Settings] = None,
) -> ImportResult:
    """One-shot convenience wrapper around CsvImporter."""
    return CsvImporter(repo, sink=sink, settings=settings).import_file(source)
