# Namespace for pipeline steps
from .read_csv import ReadCsv  # noqa: F401
from .convert_rows import ConvertRows  # noqa: F401
from .persist_records import PersistRecords  # noqa: F401
