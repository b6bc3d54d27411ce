from __future__ import annotations

import logging

from pipelines.runner import RunContext
from services.csv_parsing import parse_header, read_text, split_lines


logger = logging.getLogger(__name__)


class ReadCsv:
    """Decode the source, validate the header and queue the data lines."""

    def __init__(self, required_column: str = "company_name", quoting: bool = False) -> None:
        self.required_column = required_column
        self.quoting = quoting

    def run(self, ctx: RunContext) -> RunContext:
        text = read_text(ctx.source)
        lines = split_lines(text)
        ctx.headers = parse_header(lines[0], self.required_column, self.quoting)
        # Line numbers are 1-based and count the header as line 1
        ctx.rows = [(idx, line) for idx, line in enumerate(lines[1:], start=2)]
        ctx.meta["rows_total"] = len(ctx.rows)
        logger.info(
            "read %d data rows, %d columns",
            len(ctx.rows),
            len(ctx.headers),
            extra={"step": "read_csv", "status": "ok", "run_id": ctx.run_id or "-"},
        )
        return ctx
