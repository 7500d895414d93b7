"""Output formatting helpers for the dashboard and reports.

Percentages are derived at presentation time from raw counts; nothing here
is stored.
"""

from typing import Optional


def percentage_of_total(value: int, total: int, precision: int = 1) -> float:
    """Return ``value / total * 100`` rounded, or 0.0 when *total* is zero.

    Examples:
        percentage_of_total(3, 8) -> 37.5
        percentage_of_total(0, 0) -> 0.0
    """
    if not total:
        return 0.0
    return round(value / total * 100, precision)


def format_percent(value: Optional[float], precision: int = 1) -> str:
    """Format a percentage for display.

    Args:
        value: Percentage value (0.0 to 100.0)
        precision: Decimal places (default: 1)

    Returns:
        Formatted string like "42.5%"

    Examples:
        format_percent(42.5) -> "42.5%"
        format_percent(0) -> "0.0%"
        format_percent(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:.{precision}f}%"

