"""Tests for CatalogSession against the in-memory backend."""

from __future__ import annotations

from media_tracker.catalog.session import CatalogSession


def test_refresh_and_stats(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        session.refresh()
        summary = session.stats()

    assert summary.total == 2
    assert summary.completed_count == 1
    assert summary.average_rating == "8.0"
    assert summary.top_genre == "Sci-Fi"


def test_invalid_submit_makes_no_request(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        errors = session.submit({"title": "", "type": "Movie", "genre": "Drama", "year": "1850", "status": "Planned"})

    assert errors == ["Title is required.", "Year must be between 1900 and 2100."]
    assert backend.requests == []


def test_submit_without_id_creates(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        errors = session.submit(
            {"title": " Heat ", "type": "Movie", "genre": "Crime", "year": "1995", "rating": "9", "status": "Completed"}
        )

    assert errors == []
    assert [r.title for r in session.records] == ["Arrival", "Dune", "Heat"]
    assert ("POST", "/api/records") in backend.requests


def test_submit_with_id_updates(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        errors = session.submit(
            {"id": "2", "title": "Dune", "type": "Book", "genre": "Sci-Fi", "year": "1965", "rating": "10", "status": "Completed"}
        )

    assert errors == []
    assert session.find("2").rating == 10
    assert session.stats().completed_count == 2


def test_server_error_is_returned_as_message(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        errors = session.submit(
            {"id": "99", "title": "Gone", "type": "Movie", "genre": "Drama", "year": "2000", "status": "Dropped"}
        )

    assert errors == ["Record not found."]


def test_delete_refreshes(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        session.refresh()
        session.delete("1")

    assert [r.id for r in session.records] == ["2"]
    assert session.find("1") is None


def test_visible_filters_current_records(backend) -> None:
    with backend.client() as client:
        session = CatalogSession(client)
        session.refresh()

    assert [r.title for r in session.visible("dun")] == ["Dune"]
    assert [r.title for r in session.visible(status="Completed")] == ["Arrival"]
