# src/media_tracker/catalog/listing.py

from __future__ import annotations

from collections.abc import Iterable

from media_tracker.domain.models import NO_DATA, Record

ALL_STATUSES = "ALL"

_COLUMNS = ("ID", "Title", "Type", "Genre", "Year", "Rating", "Status")


def filter_records(
    records: Iterable[Record],
    query: str = "",
    status: str = ALL_STATUSES,
) -> list[Record]:
    """Case-insensitive title search combined with an exact status filter."""
    needle = query.strip().lower()
    return [
        r
        for r in records
        if needle in (r.title or "").lower()
        and (status == ALL_STATUSES or r.status == status)
    ]


def _row(record: Record) -> tuple[str, ...]:
    return (
        record.id or "",
        record.title,
        record.type,
        record.genre,
        "" if record.year is None else str(record.year),
        NO_DATA if record.rating is None else str(record.rating),
        record.status,
    )


def format_table(records: Iterable[Record]) -> list[str]:
    """Render records as aligned text rows with a header line."""
    rows = [_COLUMNS, *(_row(r) for r in records)]
    widths = [max(len(row[i]) for row in rows) for i in range(len(_COLUMNS))]
    return [
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    ]
