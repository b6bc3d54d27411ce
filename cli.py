import argparse
import dataclasses
import json
import sys
from pathlib import Path

from config.settings import get_settings
from pipelines.import_companies import CsvImporter
from services.errors import CsvImportError
from services.record_ids import next_record_id
from services.reporting import print_summary
from stores.record_store import InMemoryRecordStore
from utils.logging_setup import init_logging


def _load_store(path):
    if not path:
        return InMemoryRecordStore()
    return InMemoryRecordStore.from_json_file(path)


def cmd_import(args):
    settings = get_settings()
    overrides = {}
    if args.strict_cells:
        overrides["cell_error_policy"] = "abort"
    if args.quoting:
        overrides["csv_quoting"] = True
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    try:
        # Known records only feed id generation; the output is the new batch
        store = _load_store(args.existing)
        result = CsvImporter(store, settings=settings).import_file(Path(args.file))
    except CsvImportError as e:
        print(str(e))
        sys.exit(1)

    payload = [r.to_payload() for r in result.imported_records]
    output_path = Path(args.output) if args.output else None
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        print_summary(result, source=args.file, output_path=output_path)
    else:
        # stdout carries only the JSON document
        print_summary(result, source=args.file, stream=sys.stderr)
        print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_next_id(args):
    settings = get_settings()
    try:
        store = _load_store(args.existing)
    except CsvImportError as e:
        print(str(e))
        sys.exit(1)
    print(next_record_id(store.all_records(), settings.record_id_prefix))


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Company directory admin CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_imp = sub.add_parser("import", help="Import companies from a CSV file")
    p_imp.add_argument("--file", "-f", required=True, help="Path to the CSV file (header must include company_name)")
    p_imp.add_argument("--existing", help="JSON file with already known records (used for id generation)")
    p_imp.add_argument("--output", "-o", help="Write imported records as JSON here instead of stdout")
    p_imp.add_argument("--strict-cells", action="store_true", help="Abort the whole run on a malformed cell instead of skipping the row")
    p_imp.add_argument("--quoting", action="store_true", help="Honour quoted values containing commas")
    p_imp.set_defaults(func=cmd_import)

    p_id = sub.add_parser("next-id", help="Print the next sequential record id")
    p_id.add_argument("--existing", help="JSON file with already known records")
    p_id.set_defaults(func=cmd_next_id)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
