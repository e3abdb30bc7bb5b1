# media_tracker/io/records_jsonl.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from media_tracker.domain.models import Record
from media_tracker.io.jsonl import iter_jsonl_objects, write_jsonl


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def record_from_raw(raw: dict[str, Any]) -> Record:
    """Convert a raw JSON dict into a Record instance."""
    record_id = raw.get("id")
    return Record(
        id=None if record_id is None else str(record_id),
        title=_text(raw.get("title")),
        type=_text(raw.get("type")),
        genre=_text(raw.get("genre")),
        year=raw.get("year"),
        rating=raw.get("rating"),
        status=_text(raw.get("status")),
        notes=_text(raw.get("notes")),
    )


def record_to_payload(record: Record) -> dict[str, Any]:
    """Request body for create/update calls. The backend owns ``id``."""
    return {
        "title": record.title,
        "type": record.type,
        "genre": record.genre,
        "year": record.year,
        "rating": record.rating,
        "status": record.status,
        "notes": record.notes,
    }


def record_to_raw(record: Record) -> dict[str, Any]:
    """Convert a Record instance into a JSON-serialisable dict."""
    return {"id": record.id, **record_to_payload(record)}


def records_from_response(data: Any) -> list[Record]:
    """Decode a records listing: either a bare list or ``{"items": [...]}``."""
    if isinstance(data, dict):
        data = data.get("items") or []
    if not isinstance(data, list):
        return []
    return [record_from_raw(item) for item in data if isinstance(item, dict)]


def load_records_from_jsonl(path: str | Path) -> list[Record]:
    """Load records from a JSONL snapshot file into a list of Record objects."""
    return [record_from_raw(raw) for raw in iter_jsonl_objects(path)]


def save_records_to_jsonl(records: Iterable[Record], path: str | Path) -> int:
    """Write records to a JSONL file, one record per line."""
    return write_jsonl(path, (record_to_raw(r) for r in records))
