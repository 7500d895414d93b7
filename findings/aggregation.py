"""
Dashboard aggregations over a (possibly part-scoped) snapshot of records.

Provides:
  - combination_frequency: count per (finding type, part number) with a
    frequency band per group.
  - band_summary: how many *groups* fall in each band (not records).
  - category_distribution: count per finding type.
  - top_contributors: count per kitteo user, top 10, with absent users
    grouped under ``UNASSIGNED``.
  - summarize: all of the above in one ``DashboardSummary``.

Grouping keeps first-encounter order and every ranking uses Python's stable
``sorted``, so equal counts keep the order in which their group first
appeared in the input.  For ``top_contributors`` that also decides which
tied users survive the cut at position 10.

Bands use absolute count thresholds, independent of the size of the
record set.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from findings.filters import filter_by_part_number
from findings.models import FindingRecord

BAND_LOW = "1-2 times"
BAND_MID = "2-5 times"
BAND_HIGH = "more than 5 times"
FREQUENCY_BANDS = (BAND_LOW, BAND_MID, BAND_HIGH)

UNASSIGNED = "UNASSIGNED"
TOP_CONTRIBUTORS_LIMIT = 10


@dataclass(frozen=True)
class CombinationCount:
    finding_type: str
    part_number: str
    count: int
    band: str


@dataclass(frozen=True)
class CategoryCount:
    name: str
    value: int


@dataclass(frozen=True)
class ContributorCount:
    name: str
    count: int


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard renders for one snapshot."""

    total_records: int = 0
    total_quantity: int = 0
    combinations: list[CombinationCount] = field(default_factory=list)
    bands: dict[str, int] = field(default_factory=lambda: dict.fromkeys(FREQUENCY_BANDS, 0))
    categories: list[CategoryCount] = field(default_factory=list)
    contributors: list[ContributorCount] = field(default_factory=list)


def frequency_band(count: int) -> str:
    """Classify a group count: <=2 low, 3..5 mid, >5 high."""
    if count <= 2:
        return BAND_LOW
    if count <= 5:
        return BAND_MID
    return BAND_HIGH


def _ranked(counter: Counter) -> list[tuple]:
    # Counter keeps insertion order; sorted() is stable.
    return sorted(counter.items(), key=lambda kv: kv[1], reverse=True)


def combination_frequency(records: Iterable[FindingRecord]) -> list[CombinationCount]:
    """Group by ``(finding_type, part_number)``, most frequent first."""
    counts = Counter((r.finding_type, r.part_number) for r in records)
    return [
        CombinationCount(
            finding_type=finding_type,
            part_number=part_number,
            count=count,
            band=frequency_band(count),
        )
        for (finding_type, part_number), count in _ranked(counts)
    ]


def band_summary(combinations: Iterable[CombinationCount]) -> dict[str, int]:
    """Count combination groups per band.  All bands are always present."""
    summary = dict.fromkeys(FREQUENCY_BANDS, 0)
    for combo in combinations:
        summary[combo.band] += 1
    return summary


def category_distribution(records: Iterable[FindingRecord]) -> list[CategoryCount]:
    """Group by ``finding_type``, most frequent first."""
    counts = Counter(r.finding_type for r in records)
    return [CategoryCount(name=name, value=value) for name, value in _ranked(counts)]


def top_contributors(
    records: Iterable[FindingRecord],
    limit: int = TOP_CONTRIBUTORS_LIMIT,
) -> list[ContributorCount]:
    """Group by ``kitteo_user`` and keep the *limit* largest groups.

    Records without a kitteo user form a single ``UNASSIGNED`` group.
    """
    counts = Counter((r.kitteo_user or "").strip() or UNASSIGNED for r in records)
    return [
        ContributorCount(name=name, count=count)
        for name, count in _ranked(counts)[:limit]
    ]


def summarize(
    records: Iterable[FindingRecord],
    part_number: str | None = None,
) -> DashboardSummary:
    """Run every dashboard aggregation over *records*.

    Args:
        records: Snapshot of finding records.
        part_number: Optional scoping filter (exact part number).

    Returns:
        DashboardSummary; empty-but-valid when no records remain.
    """
    scoped = filter_by_part_number(records, part_number)
    combinations = combination_frequency(scoped)
    return DashboardSummary(
        total_records=len(scoped),
        total_quantity=sum(r.quantity for r in scoped),
        combinations=combinations,
        bands=band_summary(combinations),
        categories=category_distribution(scoped),
        contributors=top_contributors(scoped),
    )
