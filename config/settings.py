from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


CELL_ERROR_POLICIES = ("skip", "abort")


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str
    run_env: str

    # Record defaults
    record_id_prefix: str
    default_logo_url: str
    source_found: str
    default_language: str

    # CSV handling
    required_column: str
    cell_error_policy: str  # skip | abort
    csv_quoting: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    cell_error_policy = os.getenv("CELL_ERROR_POLICY", "skip").strip().lower()
    if cell_error_policy not in CELL_ERROR_POLICIES:
        raise RuntimeError(
            f"CELL_ERROR_POLICY must be one of {', '.join(CELL_ERROR_POLICIES)} (got {cell_error_policy!r})"
        )
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        record_id_prefix=os.getenv("RECORD_ID_PREFIX", "CORP"),
        default_logo_url=os.getenv(
            "DEFAULT_LOGO_URL",
            "https://images.unsplash.com/photo-1516245834210-c4c142787335?auto=format&fit=crop&w=300",
        ),
        source_found=os.getenv("SOURCE_FOUND", "Company Website"),
        default_language=os.getenv("DEFAULT_LANGUAGE", "ENGLISH").strip().upper(),
        required_column=os.getenv("REQUIRED_COLUMN", "company_name").strip().lower(),
        cell_error_policy=cell_error_policy,
        csv_quoting=_as_bool(os.getenv("CSV_QUOTING")),
    )
