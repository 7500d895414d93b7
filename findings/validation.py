"""Validation of a new finding before it is sent to the record store.

Every required field is checked in one pass so the caller can report all
problems at once; nothing is submitted when any check fails.
"""

import datetime
import re
from collections.abc import Mapping
from typing import Any

from findings.errors import ValidationError
from findings.models import FindingFields
from utils.config import Enumerations

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

REQUIRED_FIELDS = (
    "date",
    "order_number",
    "finding_type",
    "part_number",
    "quantity",
    "reporting_user",
)


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _is_calendar_date(value: str) -> bool:
    """True for a zero-padded YYYY-MM-DD string naming a real day."""
    if not ISO_DATE.match(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_finding(
    payload: Mapping[str, Any],
    enums: Enumerations | None = None,
) -> FindingFields:
    """Check *payload* and return normalised insert fields.

    Normalisation: area is forced to the deployment constant, the kitteo user
    is upper-cased, and blank optional fields become None.

    Raises:
        ValidationError: listing every missing or invalid field.
    """
    enums = enums or Enumerations()
    bad: list[str] = [f for f in REQUIRED_FIELDS if not _text(payload.get(f))]

    date = _text(payload.get("date"))
    if date and not _is_calendar_date(date):
        bad.append("date")

    quantity = payload.get("quantity")
    if "quantity" not in bad:
        try:
            quantity = int(quantity)
        except (TypeError, ValueError):
            quantity = 0
        if quantity < 1:
            bad.append("quantity")

    finding_type = _text(payload.get("finding_type"))
    if finding_type and not enums.is_valid_finding_type(finding_type):
        bad.append("finding_type")

    reporting_user = _text(payload.get("reporting_user"))
    if reporting_user and not enums.is_valid_user(reporting_user):
        bad.append("reporting_user")

    if bad:
        raise ValidationError(list(dict.fromkeys(bad)))

    return FindingFields(
        date=date,
        area=enums.area,
        order_number=_text(payload.get("order_number")),
        finding_type=finding_type,
        part_number=_text(payload.get("part_number")),
        quantity=quantity,
        reporting_user=reporting_user,
        required_part_number=_text(payload.get("required_part_number")) or None,
        kitteo_user=_text(payload.get("kitteo_user")).upper() or None,
    )
