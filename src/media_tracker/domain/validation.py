# media_tracker/domain/validation.py

"""Validation rules applied to a candidate record before it is saved.

Every rule is checked independently and each failing rule contributes one
message, so callers can show all problems at once. Validation never raises:
an invalid record is a normal result, not an error.
"""

from __future__ import annotations

import math
from typing import Any

from media_tracker.domain.models import Record

MIN_YEAR = 1900
MAX_YEAR = 2100
MIN_RATING = 1
MAX_RATING = 10


def is_whole_number(value: Any) -> bool:
    """Return True for ints and integral floats (booleans excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def _in_range(value: Any, low: int, high: int) -> bool:
    # NaN and non-numbers are never inside the range.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return low <= value <= high


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def validate(candidate: Record) -> list[str]:
    """Return the violation messages for ``candidate`` (empty when valid)."""
    errors: list[str] = []

    if _is_blank(candidate.title):
        errors.append("Title is required.")
    if not candidate.type:
        errors.append("Type is required.")
    if _is_blank(candidate.genre):
        errors.append("Genre is required.")

    if not is_whole_number(candidate.year):
        errors.append("Year must be a whole number.")
    if not _in_range(candidate.year, MIN_YEAR, MAX_YEAR):
        errors.append(f"Year must be between {MIN_YEAR} and {MAX_YEAR}.")

    if not candidate.status:
        errors.append("Status is required.")

    if candidate.rating is not None:
        if not is_whole_number(candidate.rating):
            errors.append("Rating must be a whole number.")
        if not _in_range(candidate.rating, MIN_RATING, MAX_RATING):
            errors.append(f"Rating must be between {MIN_RATING} and {MAX_RATING}.")

    return errors
