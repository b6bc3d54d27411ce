from __future__ import annotations

import json
import sys
from typing import List

import pytest


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


def test_cli_import_writes_output_json(tmp_path, capsys):
    csv_path = tmp_path / "companies.csv"
    csv_path.write_text("company_name,description,tags\nAcme,Widgets,b2b\n\n", encoding="utf-8")
    existing = tmp_path / "existing.json"
    existing.write_text(json.dumps([{
        "id": "CORP-0007", "lastAccessed": "2026-01-01", "subject": "Old", "details": "Old", "name": "Old",
    }]), encoding="utf-8")
    out_path = tmp_path / "out" / "records.json"

    _run_cli_with_args(["import", "--file", str(csv_path), "--existing", str(existing), "--output", str(out_path)])

    records = json.loads(out_path.read_text(encoding="utf-8"))
    assert len(records) == 1
    assert records[0]["id"] == "CORP-0008"
    assert records[0]["name"] == "Acme"
    assert records[0]["tags"] == ["B2B"]
    assert records[0]["sourceFound"] == "Company Website"
    out = capsys.readouterr().out
    assert "Successfully imported 1 companies (1 rows skipped)" in out


def test_cli_import_missing_column_exits_nonzero(tmp_path, capsys):
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text("name\nAcme\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["import", "--file", str(csv_path)])
    assert exc.value.code == 1
    assert 'Required column "company_name" is missing' in capsys.readouterr().out


def test_cli_next_id(tmp_path, capsys):
    existing = tmp_path / "existing.json"
    existing.write_text(json.dumps({"records": [
        {"id": "CORP-0041", "lastAccessed": "2026-01-01", "subject": "A", "details": "A", "name": "A"},
    ]}), encoding="utf-8")
    _run_cli_with_args(["next-id", "--existing", str(existing)])
    assert capsys.readouterr().out.strip().splitlines()[-1] == "CORP-0042"


def test_cli_import_stdout_is_only_json(tmp_path, capsys):
    csv_path = tmp_path / "companies.csv"
    csv_path.write_text("company_name,city\nAcme,Berlin\nBeta,Hamburg\n", encoding="utf-8")

    _run_cli_with_args(["import", "--file", str(csv_path)])

    captured = capsys.readouterr()
    records = json.loads(captured.out)
    assert [r["name"] for r in records] == ["Acme", "Beta"]
    assert [r["id"] for r in records] == ["CORP-0001", "CORP-0002"]
    assert "Successfully imported 2 companies" in captured.err


def test_cli_import_invalid_existing_file_exits_nonzero(tmp_path, capsys):
    csv_path = tmp_path / "companies.csv"
    csv_path.write_text("company_name\nAcme\n", encoding="utf-8")
    existing = tmp_path / "existing.json"
    existing.write_text(json.dumps([{"id": "CORP-0007"}]), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["import", "--file", str(csv_path), "--existing", str(existing)])
    assert exc.value.code == 1
    assert "not valid company records" in capsys.readouterr().out
