"""CSV layout for exporting findings.

The column order and quoting are fixed: free-text columns (finding type,
reporting user, kitteo user) are wrapped in double quotes, the rest are
written bare unless they contain a comma, quote or line break, and missing
optional values are empty cells.
"""

from collections.abc import Iterable
from datetime import date

from findings.models import FindingRecord

CSV_HEADERS = [
    "Fecha",
    "Area",
    "No. Orden",
    "Hallazgo",
    "No. de Parte",
    "No. de Parte Requerido",
    "Cantidad",
    "Usuario",
    "Usuario Kitteo",
]

FILENAME_PREFIX = "kitteo_hallazgos_"

_SPECIAL = (",", '"', "\r", "\n")


def _quoted(value: str | None) -> str:
    if not value:
        return ""
    return '"' + value.replace('"', '""') + '"'


def _bare(value) -> str:
    """Write *value* unquoted unless it holds a separator, quote or newline."""
    if value is None:
        return ""
    text = str(value)
    if any(ch in text for ch in _SPECIAL):
        return _quoted(text)
    return text


def format_csv_row(record: FindingRecord) -> list[str]:
    """Return the cells of *record* in ``CSV_HEADERS`` order."""
    return [
        _bare(record.date),
        _bare(record.area),
        _bare(record.order_number),
        _quoted(record.finding_type),
        _bare(record.part_number),
        _bare(record.required_part_number),
        _bare(record.quantity),
        _quoted(record.reporting_user),
        _quoted(record.kitteo_user),
    ]


def iter_csv_lines(records: Iterable[FindingRecord]):
    """Yield the header line then one line per record (no trailing newline)."""
    yield ",".join(CSV_HEADERS)
    for record in records:
        yield ",".join(format_csv_row(record))


def to_csv(records: Iterable[FindingRecord]) -> str:
    return "\n".join(iter_csv_lines(records))


def export_filename(today: date | None = None, extension: str = "csv") -> str:
    """Return ``kitteo_hallazgos_<YYYY-MM-DD>.<extension>``."""
    today = today or date.today()
    return f"{FILENAME_PREFIX}{today.isoformat()}.{extension}"
