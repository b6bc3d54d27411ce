from __future__ import annotations

from datetime import date

import pytest

from config.settings import get_settings
from models.company_record import CompanyRecord
from pipelines.import_companies import CsvImporter, import_companies
from services.errors import FormatError, ImportInProgressError, ParseError
from stores.record_store import InMemoryRecordStore


def _fixed_today() -> date:
    return date(2026, 10, 16)


def _existing(record_id: str) -> CompanyRecord:
    return CompanyRecord(id=record_id, last_accessed="2026-01-01", subject="Old", details="Old", name="Old")


def test_end_to_end_one_record_one_skip():
    store = InMemoryRecordStore()
    importer = CsvImporter(store, today=_fixed_today)
    result = importer.import_file("company_name,description\nAcme,Widgets\n,,")
    assert result.processed_count == 1
    assert result.skipped_count == 1
    rec = result.imported_records[0]
    assert rec.name == "Acme"
    assert rec.description == "Widgets"
    assert rec.id == "CORP-0001"
    assert rec.last_accessed == "2026-10-16"


def test_missing_company_name_column_aborts_with_no_records():
    store = InMemoryRecordStore()
    with pytest.raises(FormatError):
        CsvImporter(store, sink=store).import_file("name,description\nAcme,Widgets\n")
    assert store.all_records() == []


def test_empty_file_is_format_error():
    with pytest.raises(FormatError):
        CsvImporter(InMemoryRecordStore()).import_file(b"")


def test_whitespace_lines_and_blank_names_are_skipped():
    text = "company_name,city\n   \nAcme,Berlin\n,Hamburg\nBeta,\n"
    result = CsvImporter(InMemoryRecordStore()).import_file(text)
    assert [r.name for r in result.imported_records] == ["Acme", "Beta"]
    assert result.processed_count == 2
    assert result.skipped_count == 2


def test_ids_continue_after_highest_known_record():
    store = InMemoryRecordStore([_existing("CORP-0007"), _existing("CORP-0003")])
    result = CsvImporter(store, sink=store).import_file("company_name\nAcme\nBeta\n")
    assert [r.id for r in result.imported_records] == ["CORP-0008", "CORP-0009"]
    # Sink received the batch in order
    assert [r.id for r in store.all_records()][-2:] == ["CORP-0008", "CORP-0009"]


def test_second_run_sees_records_from_first_run():
    store = InMemoryRecordStore()
    importer = CsvImporter(store, sink=store)
    importer.import_file("company_name\nAcme\n")
    result = importer.import_file("company_name\nBeta\n")
    assert result.imported_records[0].id == "CORP-0002"


def test_no_language_column_defaults_to_english():
    result = CsvImporter(InMemoryRecordStore()).import_file("company_name,city\nAcme,Berlin\n")
    assert result.imported_records[0].language == ["ENGLISH"]


def test_uppercase_headers_and_camel_case_columns():
    text = "Company_Name,ZipCode,TaxId,Twitter\nAcme,10115,DE1,@acme\n"
    rec = CsvImporter(InMemoryRecordStore()).import_file(text).imported_records[0]
    assert rec.zip_code == "10115"
    assert rec.tax_id == "DE1"
    assert rec.social_media.twitter == "@acme"


def test_malformed_images_skips_only_that_row():
    text = "company_name,images\nAcme,{not json\nBeta,[]\n"
    result = CsvImporter(InMemoryRecordStore()).import_file(text)
    assert [r.name for r in result.imported_records] == ["Beta"]
    assert result.imported_records[0].id == "CORP-0001"
    assert result.processed_count == 1
    assert result.skipped_count == 1
    assert len(result.warnings) == 1
    w = result.warnings[0]
    assert w.row == 2
    assert w.column == "images"
    assert w.issue == "invalid_images_json"
    assert w.action == "row_skipped"


def test_malformed_images_aborts_run_with_abort_policy(monkeypatch):
    monkeypatch.setenv("CELL_ERROR_POLICY", "abort")
    get_settings.cache_clear()
    store = InMemoryRecordStore()
    with pytest.raises(ParseError):
        CsvImporter(store, sink=store).import_file("company_name,images\nBeta,[]\nAcme,{not json\n")
    assert store.all_records() == []


def test_invalid_cell_policy_rejected(monkeypatch):
    monkeypatch.setenv("CELL_ERROR_POLICY", "ignore")
    get_settings.cache_clear()
    with pytest.raises(RuntimeError):
        get_settings()


def test_quoting_setting_keeps_quoted_lists(monkeypatch):
    monkeypatch.setenv("CSV_QUOTING", "true")
    get_settings.cache_clear()
    text = 'company_name,tags,images\nAcme,"saas, b2b","[""a.png"",""b.png""]"\n'
    rec = CsvImporter(InMemoryRecordStore()).import_file(text).imported_records[0]
    assert rec.tags == ["SAAS", "B2B"]
    assert rec.images == ["a.png", "b.png"]


def test_concurrent_run_is_rejected_and_guard_released():
    store = InMemoryRecordStore()
    seen = []

    def _progress(processed, skipped):
        try:
            importer.import_file("company_name\nNested\n")
        except ImportInProgressError as e:
            seen.append(e)

    importer = CsvImporter(store, on_progress=_progress)
    result = importer.import_file("company_name\nAcme\n")
    assert result.processed_count == 1
    assert len(seen) == 1
    assert importer.busy is False
    # Guard is released after a failed run too
    with pytest.raises(FormatError):
        importer.import_file("nope\n")
    assert importer.busy is False


def test_import_from_csv_path(tmp_path):
    p = tmp_path / "companies.csv"
    p.write_text("company_name,category\nAcme,saas\n", encoding="utf-8")
    result = import_companies(p, InMemoryRecordStore())
    assert result.imported_records[0].category == ["SAAS"]
