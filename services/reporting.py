from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from models.import_result import ImportResult


def summary_line(result: ImportResult) -> str:
    line = f"Successfully imported {result.processed_count} companies"
    if result.skipped_count > 0:
        line += f" ({result.skipped_count} rows skipped)"
    return line


def print_summary(result: ImportResult, source: Optional[str] = None, output_path: Optional[Path] = None, stream: Optional[TextIO] = None) -> None:
    """Print summary of an import run (stdout unless another stream is given)."""
    def _p(text: str = "") -> None:
        print(text, file=stream or sys.stdout)

    _p("\n" + "="*60)
    _p("COMPANY CSV IMPORT - SUMMARY")
    _p("="*60)
    if source:
        _p(f"Source: {source}")
    _p(f"Processed: {result.processed_count} | Skipped: {result.skipped_count}")
    if result.imported_records:
        first = result.imported_records[0].id
        last = result.imported_records[-1].id
        _p(f"Record Ids: {first} .. {last}")
    if result.warnings:
        _p()
        _p("Warnings:")
        for w in result.warnings:
            _p(f"  row {w.row}: {w.issue} in {w.column or '-'} -> {w.action}")
    _p()
    _p(summary_line(result))
    if output_path:
        _p(f"Output File: {output_path}")
    _p("="*60)
