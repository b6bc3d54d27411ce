from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from config.settings import Settings, get_settings
from models.company_record import CompanyRecord, SocialMedia
from services.csv_parsing import is_row_empty
from services.errors import ParseError


def _field(data: Dict[str, str], name: str) -> str:
    """Case-insensitive, trimmed column lookup; '' when absent."""
    return (data.get(name.lower()) or "").strip()


def split_upper_list(value: Optional[str]) -> List[str]:
    """'a, b,c' -> ['A', 'B', 'C']; blank input -> []."""
    text = (value or "").strip()
    if not text:
        return []
    return [part.strip().upper() for part in text.split(",") if part.strip()]


def parse_images(value: Optional[str], row: Optional[int] = None) -> List[str]:
    text = (value or "").strip()
    if not text:
        return []
    try:
        parsed: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in images column: {e.msg}", row=row, column="images", value=text) from e
    if not isinstance(parsed, list):
        raise ParseError("images column must be a JSON array", row=row, column="images", value=text)
    if not all(isinstance(item, str) for item in parsed):
        raise ParseError("images column must be a JSON array of strings", row=row, column="images", value=text)
    return list(parsed)


def convert_to_record(
    data: Dict[str, str],
    record_id: str,
    lookup_date: str,
    settings: Optional[Settings] = None,
    row: Optional[int] = None,
) -> Optional[CompanyRecord]:
    """Build a CompanyRecord from one row's field mapping.

    Returns None for rows that must be skipped (all blank, or blank company
    name). Raises ParseError when the images cell is not a JSON array.
    """
    settings = settings or get_settings()
    if is_row_empty(data):
        return None
    name = _field(data, settings.required_column)
    if not name:
        return None

    description = _field(data, "description") or name
    language = split_upper_list(_field(data, "language")) or [settings.default_language]

    return CompanyRecord(
        id=record_id,
        status="ACTIVE",
        level="PUBLIC",
        last_accessed=lookup_date,
        subject=name,
        details=description,
        required_clearance="PUBLIC",
        name=name,
        address=_field(data, "address"),
        zip_code=_field(data, "zipCode"),
        city=_field(data, "city"),
        country=_field(data, "country"),
        logo=_field(data, "logo") or settings.default_logo_url,
        images=parse_images(data.get("images"), row=row),
        category=split_upper_list(_field(data, "category")),
        tags=split_upper_list(_field(data, "tags")),
        social_media=SocialMedia(
            twitter=_field(data, "twitter"),
            linkedin=_field(data, "linkedin"),
        ),
        description=description,
        source_found=settings.source_found,
        ceo=_field(data, "ceo"),
        language=language,
        tax_id=_field(data, "taxId"),
        verification_status={},
    )
