"""Smoke tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from media_tracker.domain.models import STATUSES, Record, StatsSummary


def test_record_defaults() -> None:
    record = Record(title="Dune", type="Book", genre="Sci-Fi", year=1965, status="Planned")
    assert record.id is None
    assert record.rating is None
    assert record.notes == ""


def test_record_is_immutable() -> None:
    record = Record(title="Dune")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.title = "Arrakis"  # type: ignore[misc]


def test_status_order() -> None:
    assert STATUSES == ("Planned", "Watching", "Completed", "Dropped")


def test_summary_equality() -> None:
    breakdown = tuple((s, 0) for s in STATUSES)
    assert StatsSummary(0, 0, None, None, breakdown) == StatsSummary(
        0, 0, None, None, breakdown
    )
