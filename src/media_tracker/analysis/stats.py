# media_tracker/analysis/stats.py

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal

from media_tracker.domain.models import (
    COMPLETED,
    NO_DATA,
    STATUSES,
    Record,
    StatsSummary,
)
from media_tracker.domain.validation import is_whole_number


def count_genres(records: Iterable[Record]) -> Counter[str]:
    """Count trimmed, non-empty genres.

    Keys keep the order in which each genre was first seen; no case folding.
    """
    counter: Counter[str] = Counter()

    for record in records:
        genre = str(record.genre or "").strip()
        if not genre:
            continue
        counter[genre] += 1

    return counter


def get_genre_counts(records: Iterable[Record]) -> list[tuple[str, int]]:
    """Return a sorted list of (genre, count).

    Sorted by:
    - descending count
    - then alphabetically by genre
    """
    counter = count_genres(records)
    return sorted(counter.items(), key=lambda x: (-x[1], x[0]))


def _top_genre(counter: Counter[str]) -> str | None:
    # Counter.most_common does not promise first-seen order on ties; walk
    # the insertion order instead so the earliest genre wins.
    top: str | None = None
    top_count = 0
    for genre, count in counter.items():
        if count > top_count:
            top, top_count = genre, count
    return top


def _average_rating(completed: list[Record]) -> str | None:
    ratings = [r.rating for r in completed if is_whole_number(r.rating)]
    if not ratings:
        return None
    return _to_fixed_1(sum(ratings) / len(ratings))


def _to_fixed_1(value: float) -> str:
    """Format with one fractional digit, ties going to the larger value.

    Decimal(value) is the exact binary value, so only true ties round up;
    1.15 (stored as 1.1499...) still gives "1.1".
    """
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=rounding))


def summarize(records: Iterable[Record]) -> StatsSummary:
    """Compute catalog statistics over ``records``.

    Pure: the input is read once and never modified. Statuses outside the
    fixed set count towards ``total`` but not towards the breakdown.
    """
    items = list(records)
    completed = [r for r in items if r.status == COMPLETED]
    status_counts = Counter(r.status for r in items)

    return StatsSummary(
        total=len(items),
        completed_count=len(completed),
        average_rating=_average_rating(completed),
        top_genre=_top_genre(count_genres(items)),
        status_breakdown=tuple((s, status_counts.get(s, 0)) for s in STATUSES),
    )


def format_summary(summary: StatsSummary) -> list[str]:
    """Render a summary as display lines, sentinels shown as a dash."""
    lines = [
        f"Total: {summary.total}",
        f"Completed: {summary.completed_count}",
        f"Average rating: {summary.average_rating or NO_DATA}",
        f"Top genre: {summary.top_genre or NO_DATA}",
        "Status breakdown:",
    ]
    lines.extend(f"  {status}: {count}" for status, count in summary.status_breakdown)
    return lines
