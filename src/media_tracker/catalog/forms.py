# src/media_tracker/catalog/forms.py

"""Turn raw form text into a candidate Record.

Numeric fields are parsed the way a browser's ``parseInt(text, 10)`` reads
them. Unparsable text becomes NaN so the validator reports it as "not a
whole number" instead of treating it as missing.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping

from media_tracker.domain.models import Record

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(text: str | None) -> int | float:
    """Parse the leading decimal integer of ``text``; NaN when there is none.

    >>> parse_int("12abc")
    12
    >>> parse_int("3.5")
    3
    """
    match = _LEADING_INT.match(text or "")
    if match is None:
        return math.nan
    return int(match.group(1))


def parse_rating(text: str | None) -> int | float | None:
    """Empty rating text means "not rated"."""
    if not (text or "").strip():
        return None
    return parse_int(text)


def parse_form(fields: Mapping[str, str | None]) -> Record:
    """Build a candidate record from raw form fields.

    Recognised keys: id, title, type, genre, year, rating, status, notes.
    Missing keys read as empty text.
    """

    def text(key: str) -> str:
        return fields.get(key) or ""

    return Record(
        id=text("id").strip() or None,
        title=text("title").strip(),
        type=text("type"),
        genre=text("genre").strip(),
        year=parse_int(text("year")),
        rating=parse_rating(text("rating")),
        status=text("status"),
        notes=text("notes").strip(),
    )


def record_to_fields(record: Record) -> dict[str, str]:
    """Pre-fill form fields from an existing record (used when editing)."""
    return {
        "id": record.id or "",
        "title": record.title,
        "type": record.type,
        "genre": record.genre,
        "year": "" if record.year is None else str(record.year),
        "rating": "" if record.rating is None else str(record.rating),
        "status": record.status,
        "notes": record.notes or "",
    }
