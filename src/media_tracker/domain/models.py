# media_tracker/domain/models.py

"""Core domain models for catalog records and derived statistics."""

from __future__ import annotations

from dataclasses import dataclass

PLANNED = "Planned"
WATCHING = "Watching"
COMPLETED = "Completed"
DROPPED = "Dropped"

# Fixed display order of the status breakdown.
STATUSES: tuple[str, ...] = (PLANNED, WATCHING, COMPLETED, DROPPED)

# Placeholder shown wherever a statistic has no value.
NO_DATA = "—"


@dataclass(slots=True, frozen=True)
class Record:
    """A single catalog entry for one media item.

    ``year`` and ``rating`` hold whatever the parsing step produced: an int,
    a float (fractional or NaN for unparsable text) or None. ``rating=None``
    means "not rated".
    """

    title: str = ""
    type: str = ""
    genre: str = ""
    year: int | float | None = None
    rating: int | float | None = None
    status: str = ""
    notes: str = ""
    id: str | None = None  # assigned by the backend


@dataclass(slots=True, frozen=True)
class StatsSummary:
    """Aggregate statistics over a collection of records."""

    total: int
    completed_count: int
    average_rating: str | None  # e.g. "8.5"; None when nothing is rated
    top_genre: str | None
    status_breakdown: tuple[tuple[str, int], ...]
