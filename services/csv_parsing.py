"""
Line-level CSV handling for company imports.

Rows are split positionally on commas with no quote handling unless
quote-aware splitting is requested; embedded commas then shift columns.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import IO, Any, Dict, List, Union

from services.errors import FormatError, ReadError


CsvSource = Union[str, bytes, bytearray, Path, IO[Any]]


def read_text(source: CsvSource) -> str:
    """Return the decoded text of a path, bytes, text or file object.

    Plain ``str`` is treated as a path when it names an existing file and as
    CSV content otherwise.
    """
    if isinstance(source, (bytes, bytearray)):
        return decode_bytes(bytes(source))
    if isinstance(source, Path) or (isinstance(source, str) and _looks_like_path(source)):
        path = Path(source)
        if path.suffix.lower() != ".csv":
            raise FormatError("Please upload a valid CSV file")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ReadError(f"Failed to read CSV file: {e}") from e
        return decode_bytes(raw)
    if isinstance(source, str):
        return source
    try:
        data = source.read()
    except UnicodeDecodeError as e:
        # text-mode handles decode while reading
        raise ReadError("Failed to process CSV file: content is not valid UTF-8 text") from e
    except OSError as e:
        raise ReadError(f"Failed to read CSV file: {e}") from e
    if isinstance(data, str):
        return data
    return decode_bytes(data)


def _looks_like_path(text: str) -> bool:
    if "\n" in text or "," in text:
        return False
    try:
        return Path(text).is_file() or text.lower().endswith(".csv")
    except (OSError, ValueError):
        return False


def decode_bytes(raw: bytes) -> str:
    # utf-8-sig so a leading BOM does not leak into the first header
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ReadError("Failed to process CSV file: content is not valid UTF-8 text") from e


def split_lines(text: str) -> List[str]:
    """Split on line feeds; a final terminator does not open an extra row."""
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def split_values(line: str, quoting: bool = False) -> List[str]:
    if quoting:
        parsed = next(csv.reader(io.StringIO(line)), [])
        return [v.strip() for v in parsed]
    return [v.strip() for v in line.split(",")]


def parse_header(line: str, required_column: str = "company_name", quoting: bool = False) -> List[str]:
    headers = [h.lower() for h in split_values(line, quoting)]
    if required_column not in headers:
        raise FormatError(f'Invalid CSV format. Required column "{required_column}" is missing.')
    return headers


def map_fields(headers: List[str], line: str, quoting: bool = False) -> Dict[str, str]:
    """Zip a row against the headers by position; missing trailing values become ''."""
    values = split_values(line, quoting)
    data: Dict[str, str] = {}
    for idx, header in enumerate(headers):
        data[header] = values[idx] if idx < len(values) else ""
    return data


def is_row_empty(data: Dict[str, str]) -> bool:
    return all(not (v or "").strip() for v in data.values())
