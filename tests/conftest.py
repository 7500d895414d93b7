"""
Pytest fixtures for KITTEO findings tests.

Provides reusable test fixtures: a record factory, a small deterministic
record set, a part catalog (in memory and as parts_data.json), and a
temporary SQLite findings database seeded with known rows.

The seeded database and SAMPLE_ROWS share the same data so API tests can
assert on exact counts:

    id  date        type              part  qty  user    kitteo  created_at
    1   2024-01-01  SHAFT EQUIVOCADO  P100  1    KARLA   -       2024-01-01T08:00
    2   2024-01-15  GRIP FALTANTE     P200  2    ADRIAN  LUIS    2024-01-15T08:00
    3   2024-02-01  SHAFT EQUIVOCADO  P100  1    KARLA   LUIS    2024-02-01T08:00
    4   2024-02-10  SHAFT EQUIVOCADO  P999  3    DIANA   ANA     2024-02-10T08:00

P999 is not in the catalog (orphan part number).
"""

import json
import sqlite3
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from findings.catalog import CatalogIndex  # noqa: E402
from findings.models import FindingRecord, PartCatalogEntry  # noqa: E402


CATALOG = [
    {"id": "P100", "description": "shaft steel regular"},
    {"id": "P200", "description": "grip midsize black"},
    {"id": "P300", "description": "headcover driver"},
    {"id": "H-P100X", "description": "hosel adapter"},
]

# (date, order, finding_type, part, required_part, qty, user, kitteo, created_at)
SAMPLE_ROWS = [
    ("2024-01-01", "ORD-1", "SHAFT EQUIVOCADO", "P100", None, 1, "KARLA", None,
     "2024-01-01T08:00:00.000"),
    ("2024-01-15", "ORD-2", "GRIP FALTANTE", "P200", "P300", 2, "ADRIAN", "LUIS",
     "2024-01-15T08:00:00.000"),
    ("2024-02-01", "ORD-3", "SHAFT EQUIVOCADO", "P100", None, 1, "KARLA", "LUIS",
     "2024-02-01T08:00:00.000"),
    ("2024-02-10", "ORD-4", "SHAFT EQUIVOCADO", "P999", None, 3, "DIANA", "ANA",
     "2024-02-10T08:00:00.000"),
]


def make_record(
    id=1,
    date="2024-01-01",
    finding_type="SHAFT EQUIVOCADO",
    part_number="P100",
    reporting_user="KARLA",
    kitteo_user=None,
    quantity=1,
    order_number="ORD-1",
    required_part_number=None,
    created_at=None,
) -> FindingRecord:
    """Build a FindingRecord with sensible defaults for unit tests."""
    return FindingRecord(
        id=id,
        date=date,
        area="KITTEO",
        order_number=order_number,
        finding_type=finding_type,
        part_number=part_number,
        quantity=quantity,
        reporting_user=reporting_user,
        required_part_number=required_part_number,
        kitteo_user=kitteo_user,
        created_at=created_at,
    )


@pytest.fixture()
def sample_records() -> list[FindingRecord]:
    """SAMPLE_ROWS as records, newest first (the store's order)."""
    records = [
        make_record(
            id=i + 1, date=row[0], order_number=row[1], finding_type=row[2],
            part_number=row[3], required_part_number=row[4], quantity=row[5],
            reporting_user=row[6], kitteo_user=row[7], created_at=row[8],
        )
        for i, row in enumerate(SAMPLE_ROWS)
    ]
    return list(reversed(records))


@pytest.fixture()
def catalog() -> CatalogIndex:
    return CatalogIndex(PartCatalogEntry(**item) for item in CATALOG)


@pytest.fixture()
def catalog_file(tmp_path) -> Path:
    """Write CATALOG to a parts_data.json file and return its path."""
    path = tmp_path / "parts_data.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


def seed_findings(db_path: Path, rows=SAMPLE_ROWS) -> None:
    """Create the findings table at *db_path* and insert *rows*."""
    from api.database import TABLE, init_db

    init_db(db_path)
    conn = sqlite3.connect(str(db_path))
    conn.executemany(
        f"INSERT INTO {TABLE} (fecha, area, no_orden, hallazgo, no_parte, "
        "no_parte_requerido, cantidad, usuario, usuario_kitteo, created_at) "
        "VALUES (?, 'KITTEO', ?, ?, ?, ?, ?, ?, ?, ?)",
        rows,
    )
    conn.commit()
    conn.close()


@pytest.fixture()
def test_db(tmp_path) -> Path:
    """Return a Path to a findings database seeded with SAMPLE_ROWS."""
    db_path = tmp_path / "kitteo_test.sqlite"
    seed_findings(db_path)
    return db_path


@pytest.fixture()
def empty_db(tmp_path) -> Path:
    """Return a Path to a findings database with the table but no rows."""
    db_path = tmp_path / "kitteo_empty.sqlite"
    seed_findings(db_path, rows=[])
    return db_path
