"""
Data models for finding records and the part catalog.

Dates are carried as ISO ``YYYY-MM-DD`` strings so that lexicographic order
equals chronological order; ``RecordFilters`` normalises ``datetime.date``
inputs to that encoding.  Optional fields that only exist in later revisions
of the data (``required_part_number``, ``kitteo_user``) are ``None`` when
absent, never a placeholder string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class PartCatalogEntry:
    """One row of ``parts_data.json``."""

    id: str
    description: str


@dataclass(frozen=True, slots=True)
class FindingRecord:
    """A logged finding (hallazgo) as returned by the record store."""

    id: int | str
    date: str
    area: str
    order_number: str
    finding_type: str
    part_number: str
    quantity: int
    reporting_user: str
    required_part_number: str | None = None
    kitteo_user: str | None = None
    created_at: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "FindingRecord":
        """Build a record from a store row (``sqlite3.Row`` or dict).

        Accepts both the store's column names (``fecha``, ``no_orden``, ...)
        and the attribute names of this class.
        """
        data = dict(row)

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in data:
                    return data[key]
            return default

        return cls(
            id=pick("id"),
            date=str(pick("date", "fecha", default="")),
            area=pick("area", default=""),
            order_number=pick("order_number", "no_orden", default=""),
            finding_type=pick("finding_type", "hallazgo", default=""),
            part_number=pick("part_number", "no_parte", default=""),
            quantity=int(pick("quantity", "cantidad", default=1) or 1),
            reporting_user=pick("reporting_user", "usuario", default=""),
            required_part_number=_optional(
                pick("required_part_number", "no_parte_requerido")
            ),
            kitteo_user=_optional(pick("kitteo_user", "usuario_kitteo")),
            created_at=pick("created_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RecordFilters:
    """Independent, optional, conjunctive filter dimensions.

    ``user`` is matched exactly against the reporting user, so surrounding
    whitespace is significant; a blank value leaves the dimension unset.
    """

    date_from: str | None = None
    date_to: str | None = None
    user: str | None = None

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "date_from", _iso(self.date_from))
        object.__setattr__(self, "date_to", _iso(self.date_to))
        object.__setattr__(self, "user", _exact(self.user))

    @property
    def is_active(self) -> bool:
        return any((self.date_from, self.date_to, self.user))


@dataclass(frozen=True, slots=True)
class FindingFields:
    """Payload for inserting a new finding; the store assigns id/created_at."""

    date: str
    area: str
    order_number: str
    finding_type: str
    part_number: str
    quantity: int
    reporting_user: str
    required_part_number: str | None = None
    kitteo_user: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _optional(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _exact(value: str | None) -> str | None:
    """Blank becomes None; anything else is kept as given, whitespace included."""
    if value is None or not str(value).strip():
        return None
    return str(value)


def _iso(value: str | date | None) -> str | None:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    return _optional(value)
