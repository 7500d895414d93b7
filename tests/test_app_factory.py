"""
Tests for api/app.py create_app(): startup degradation and error mapping.
"""

import sqlite3

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402


def test_missing_catalog_degrades_to_empty(test_db, tmp_path):
    from api.app import create_app
    app = create_app(db_path=test_db, catalog_path=tmp_path / "missing.json")
    with TestClient(app, raise_server_exceptions=False) as c:
        assert c.get("/health").json()["catalog_parts"] == 0
        assert c.get("/api/v1/parts").json()["items"] == []
        items = c.get("/api/v1/findings").json()["items"]
        assert len(items) == 4
        assert all(f["part_description"] is None for f in items)
        assert [f["part_label"] for f in items] == ["P999", "P100", "P200", "P100"]


def test_enumerations_override(test_db, catalog_file, tmp_path):
    enums = tmp_path / "enums.json"
    enums.write_text('{"users": ["ZOE"], "area": "LAB"}')
    from api.app import create_app
    app = create_app(db_path=test_db, catalog_path=catalog_file, enums_path=enums)
    with TestClient(app, raise_server_exceptions=False) as c:
        assert c.get("/api/v1/reference/users").json() == ["ZOE"]
        resp = c.post("/api/v1/findings", json={
            "date": "2024-03-01", "order_number": "O-1",
            "finding_type": "GRIP EXTRA", "part_number": "P100",
            "quantity": 1, "reporting_user": "ZOE",
        })
        assert resp.status_code == 201
        assert resp.json()["area"] == "LAB"


def test_page_size_override(test_db, catalog_file):
    from api.app import create_app
    app = create_app(db_path=test_db, catalog_path=catalog_file, page_size=3)
    with TestClient(app, raise_server_exceptions=False) as c:
        body = c.get("/api/v1/findings", params={"page": 2}).json()
        assert body["page_count"] == 2
        assert [f["id"] for f in body["items"]] == [1]


def test_load_error_returns_503(tmp_path, catalog_file):
    db_path = tmp_path / "broken.sqlite"
    from api.app import create_app
    app = create_app(db_path=db_path, catalog_path=catalog_file)
    with TestClient(app, raise_server_exceptions=False) as c:
        conn = sqlite3.connect(str(db_path))
        conn.execute("DROP TABLE hallazgos_kitteo")
        conn.commit()
        conn.close()
        resp = c.get("/api/v1/findings")
        assert resp.status_code == 503
        assert resp.json()["status_code"] == 503
        assert c.get("/health").status_code == 503


def test_insert_error_returns_502(test_db, catalog_file):
    from api.app import create_app
    app = create_app(db_path=test_db, catalog_path=catalog_file)
    with TestClient(app, raise_server_exceptions=False) as c:
        conn = sqlite3.connect(str(test_db))
        conn.execute(
            "CREATE TRIGGER reject BEFORE INSERT ON hallazgos_kitteo "
            "BEGIN SELECT RAISE(ABORT, 'read only'); END"
        )
        conn.commit()
        conn.close()
        resp = c.post("/api/v1/findings", json={
            "date": "2024-03-01", "order_number": "O-1",
            "finding_type": "GRIP EXTRA", "part_number": "P100",
            "quantity": 1, "reporting_user": "KARLA",
        })
        assert resp.status_code == 502
        assert resp.json()["error"] == "Could not save finding"
