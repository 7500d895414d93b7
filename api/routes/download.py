"""
GET /api/v1/download endpoint.

Exports the filtered findings (same filters as /findings, newest first) as
CSV or Excel.  The CSV layout is fixed by findings/export.py; the Excel sheet
uses the same header row with unquoted cell values.

X-Total-Count carries the number of exported records.
"""

import io
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from api.database import FindingStore, get_store
from findings.export import CSV_HEADERS, export_filename, iter_csv_lines
from findings.filters import apply_filters
from findings.models import FindingRecord
from utils.query import build_record_filters, describe_filters

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/download", tags=["download"])


def _xlsx_bytes(records: list[FindingRecord]) -> bytes:
    """Build an .xlsx workbook (openpyxl write_only mode) for *records*."""
    import openpyxl

    wb = openpyxl.Workbook(write_only=True)
    ws = wb.create_sheet("Hallazgos")
    ws.append(CSV_HEADERS)
    for r in records:
        ws.append([
            r.date, r.area, r.order_number, r.finding_type, r.part_number,
            r.required_part_number or "", r.quantity, r.reporting_user,
            r.kitteo_user or "",
        ])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@router.get("", summary="Download filtered findings as CSV or Excel")
def download(
    fmt: str = Query("csv", pattern="^(csv|xlsx)$", description="Output format"),
    date_from: str | None = Query(None, description="Inclusive start date (YYYY-MM-DD)"),
    date_to: str | None = Query(None, description="Inclusive end date (YYYY-MM-DD)"),
    user: str | None = Query(None, description="Exact reporting user"),
    store: FindingStore = Depends(get_store),
) -> StreamingResponse:
    """Stream the filtered findings as a file attachment."""
    filters = build_record_filters(date_from, date_to, user)
    records = apply_filters(store.load_all(), filters)
    logger.info("export fmt=%s records=%d filters=%s",
                fmt, len(records), describe_filters(filters))

    extra_headers = {"X-Total-Count": str(len(records))}

    if fmt == "xlsx":
        content = _xlsx_bytes(records)
        return StreamingResponse(
            iter([content]),
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={
                "Content-Disposition": f"attachment; filename={export_filename(extension='xlsx')}",
                "Content-Length": str(len(content)),
                **extra_headers,
            },
        )

    def csv_stream():
        for i, line in enumerate(iter_csv_lines(records)):
            yield line if i == 0 else "\n" + line

    return StreamingResponse(
        csv_stream(),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename()}",
            **extra_headers,
        },
    )
