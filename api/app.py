"""
FastAPI application factory for the KITTEO findings tool.

Usage:
    python -m api.app                        # Dev server on port 8000
    APP_DB_PATH=/data/kitteo.sqlite python -m api.app

OpenAPI docs available at http://localhost:8000/docs after starting.

Startup loads the part catalog and the enumeration table once.  A catalog
that cannot be read is logged and replaced by an empty one; only part
lookups degrade.  Records are loaded from the store on every request.

Errors from the collaborators are turned into JSON bodies of the form
``{"error", "detail", "status_code"}``:
    LoadError        → 503
    InsertError      → 502
    ValidationError  → 400 (with the offending field names)
    ValueError       → 400
    anything else    → 500

Logging is plain text by default, newline-delimited JSON when
APP_LOG_FORMAT=json.
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import api.database as _db_mod
from api.database import FindingStore, _make_conn, get_db_path, init_db
from api.routes import dashboard, download, parts, reference
from api.routes import findings as findings_routes
from findings.catalog import CatalogIndex, load_catalog
from findings.errors import CatalogLoadError, InsertError, LoadError, ValidationError
from utils.config import AppConfig, load_enumerations

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


_logger = logging.getLogger("kitteo_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=logging.INFO, force=True)


def _load_catalog_or_empty(path: Path) -> CatalogIndex:
    """Load the part catalog; on failure log it and continue without parts."""
    try:
        return CatalogIndex(load_catalog(path))
    except CatalogLoadError as exc:
        _logger.warning("Part catalog unavailable, continuing without it: %s", exc)
        return CatalogIndex()


def _error(status_code: int, error: str, detail: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail, "status_code": status_code, **extra},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Make sure the findings table exists before serving requests."""
    try:
        init_db(get_db_path())
    except Exception as exc:
        _logger.error("Could not initialise database %s: %s", get_db_path(), exc)
    yield


def create_app(
    db_path: Path | None = None,
    catalog_path: Path | None = None,
    enums_path: Path | None = None,
    page_size: int | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: Override the database path (useful for testing).
        catalog_path: Override the part catalog path.
        enums_path: Override the enumerations JSON path.
        page_size: Override the page size for parts and findings.

    Returns:
        Configured FastAPI application instance.
    """
    if db_path is not None:
        _db_mod._DB_PATH = db_path

    app = FastAPI(
        title="KITTEO Findings API",
        summary="Capture and report mis-shipped or missing parts (hallazgos).",
        description=(
            "## KITTEO Findings API\n\n"
            "Log findings tied to an order, a catalog part number and a "
            "reporting user; browse, filter, export and summarise them.\n\n"
            "### Key concepts\n"
            "- **Dates** are ISO `YYYY-MM-DD` strings; date filters are inclusive.\n"
            "- **Filters** (date_from, date_to, user) combine with AND.\n"
            "- **Frequency bands** classify how often a finding type / part "
            "number combination recurs: `1-2 times`, `2-5 times`, "
            "`more than 5 times`.\n"
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "parts", "description": "Part catalog search."},
            {"name": "findings", "description": "List, filter and register findings."},
            {"name": "dashboard", "description": "Combination frequency, categories and top contributors."},
            {"name": "reference", "description": "Finding types, users and area."},
            {"name": "download", "description": "CSV / Excel export of filtered findings."},
            {"name": "meta", "description": "Health check."},
        ],
    )

    app.state.catalog = _load_catalog_or_empty(catalog_path or _cfg.catalog_path)
    app.state.enums = load_enumerations(enums_path or _cfg.enums_path)
    app.state.page_size = page_size or _cfg.page_size
    _logger.info(
        "Starting with db=%s catalog_parts=%d page_size=%d settings=%s",
        get_db_path(), len(app.state.catalog), app.state.page_size, _cfg.to_dict(),
    )

    # ── CORS middleware ───────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request and tag the response with a request id."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if _cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, request.url.path, response.status_code,
                duration_ms, request_id,
            )
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("Unhandled error on %s", request.url.path)
        return _error(500, "Internal server error", str(exc))

    @app.exception_handler(LoadError)
    async def load_error_handler(request: Request, exc: LoadError):
        _logger.warning("load_error path=%s detail=%s", request.url.path, exc)
        return _error(503, "Could not load records", str(exc))

    @app.exception_handler(InsertError)
    async def insert_error_handler(request: Request, exc: InsertError):
        _logger.warning("insert_error detail=%s", exc)
        return _error(502, "Could not save finding", str(exc))

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error(400, "Bad request", str(exc), fields=exc.fields)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return _error(400, "Bad request", str(exc))

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health():
        """Return 200 OK if the API is running and can read the findings table."""
        db_path = get_db_path()
        try:
            conn = _make_conn(db_path)
            try:
                count = FindingStore(conn).count()
            finally:
                conn.close()
        except Exception as exc:
            return JSONResponse(
                status_code=503,
                content={"status": "degraded", "error": str(exc)},
            )
        return {
            "status": "ok",
            "database": str(db_path),
            "findings": count,
            "catalog_parts": len(app.state.catalog),
        }

    # ── Register routers ──────────────────────────────────────────────────────

    prefix = "/api/v1"
    app.include_router(parts.router,     prefix=prefix)
    app.include_router(findings_routes.router, prefix=prefix)
    app.include_router(dashboard.router, prefix=prefix)
    app.include_router(reference.router, prefix=prefix)
    app.include_router(download.router,  prefix=prefix)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
