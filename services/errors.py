from __future__ import annotations

from typing import Optional


class CsvImportError(Exception):
    """Base for failures surfaced to the user when an import run is aborted."""


class FormatError(CsvImportError):
    pass


class ReadError(CsvImportError):
    pass


class ParseError(CsvImportError):
    def __init__(self, message: str, row: Optional[int] = None, column: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__(message)
        self.row = row
        self.column = column
        self.value = value


class ImportInProgressError(CsvImportError):
    pass
