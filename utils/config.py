"""Configuration management for the KITTEO findings tool.

Provides:
- Config base class exporting settings as a dict
- KnownValues: the fixed enumerations (finding types, users, area)
- Enumerations: a loaded copy of those lists, overridable from a JSON file
- AppConfig: application settings read from environment variables
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Any
import json
import os as _os


class Config:
    """Settings holder; to_dict() feeds the startup log line."""

    def to_dict(self) -> Dict[str, Any]:
        """Public attributes as a JSON-friendly dict (paths become strings)."""
        return {
            k: str(v) if isinstance(v, Path) else v
            for k, v in self.__dict__.items()
            if not k.startswith("_")
        }


class KnownValues:
    """Default enumerations used when no override file is configured."""

    AREA = "KITTEO"

    FINDING_TYPES = (
        "SHAFT EQUIVOCADO",
        "CABEZAL EQUIVOCADO",
        "HOSEL EQUIVOCADO",
        "GRIP EQUIVOCADO",
        "SHAFT FALTANTE",
        "CABEZAL FALTANTE",
        "GRIP FALTANTE",
        "HEADCOVER FALTANTE",
        "SHAFT EXTRA",
        "GRIP EXTRA",
        "SIN BANDERA Y SIN SELLO",
        "SHAFT MEZCLADO SIN ETIQUETA",
        "SHAFT MEZCLADO CON ETIQUETA",
    )

    USERS = (
        "OTTON",
        "CARMEN",
        "KARLA",
        "ADRIAN",
        "DENISE",
        "ALAN",
        "CINTYA",
        "ESTRELLA",
        "JUAN",
        "FAUSTO",
        "DIANA",
    )


@dataclass(frozen=True)
class Enumerations:
    """Closed value lists for the capture form, in display order."""

    finding_types: tuple[str, ...] = KnownValues.FINDING_TYPES
    users: tuple[str, ...] = KnownValues.USERS
    area: str = KnownValues.AREA

    def is_valid_finding_type(self, value: str) -> bool:
        return value in self.finding_types

    def is_valid_user(self, value: str) -> bool:
        return value in self.users


def load_enumerations(path: Optional[Path] = None) -> Enumerations:
    """Load finding types and users from a JSON file.

    The file looks like ``{"finding_types": [...], "users": [...]}``; either
    key may be omitted to keep the default list.

    Args:
        path: JSON file, or None for the built-in KnownValues.

    Raises:
        FileNotFoundError: If *path* doesn't exist
        json.JSONDecodeError: If *path* is not valid JSON
        ValueError: If a list is present but not a list of strings
    """
    if path is None:
        return Enumerations()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    def _list(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        values = data.get(key)
        if values is None:
            return default
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"{path}: '{key}' must be a list of strings")
        return tuple(values)

    return Enumerations(
        finding_types=_list("finding_types", KnownValues.FINDING_TYPES),
        users=_list("users", KnownValues.USERS),
        area=data.get("area", KnownValues.AREA),
    )


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    All env vars have sensible defaults so the application works out of the
    box without any configuration.

    Environment variables:
        APP_DB_PATH: Path to the SQLite findings database (default: kitteo.sqlite)
        APP_CATALOG_PATH: Path to the part catalog JSON (default: parts_data.json)
        APP_ENUMS_PATH: Optional JSON override for finding types / users
        APP_PORT: API server port (default: 8000)
        APP_HOST: API server bind address (default: 127.0.0.1)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        APP_PAGE_SIZE: Items per page for parts and findings (default: 100)
    """

    def __init__(self) -> None:
        super().__init__()
        self.db_path = Path(_os.getenv("APP_DB_PATH", "kitteo.sqlite"))
        self.catalog_path = Path(_os.getenv("APP_CATALOG_PATH", "parts_data.json"))
        raw_enums = _os.getenv("APP_ENUMS_PATH", "").strip()
        self.enums_path: Optional[Path] = Path(raw_enums) if raw_enums else None
        self.api_port = int(_os.getenv("APP_PORT", "8000"))
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.page_size = int(_os.getenv("APP_PAGE_SIZE", "100"))

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()
