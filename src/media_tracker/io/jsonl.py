# media_tracker/io/jsonl.py

"""JSONL snapshot files: one JSON object per line, UTF-8."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def iter_jsonl_objects(path: str | Path) -> Iterator[dict[str, Any]]:
    """Yield each JSON object in ``path``.

    A missing file yields nothing. Blank lines are skipped silently; lines
    that are not valid JSON, or hold something other than an object, are
    skipped with a warning naming the line.
    """
    file_path = Path(path)
    if not file_path.exists():
        logger.debug("Snapshot %s not found.", file_path)
        return

    with file_path.open("r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as exc:
                logger.warning(
                    "Skipping invalid JSON line %d in %s: %s",
                    line_number,
                    file_path,
                    exc,
                )
                continue
            if not isinstance(obj, dict):
                logger.warning(
                    "Skipping line %d in %s: expected an object, got %s",
                    line_number,
                    file_path,
                    type(obj).__name__,
                )
                continue
            yield obj


def write_jsonl(path: str | Path, objects: Iterable[dict[str, Any]]) -> int:
    """Replace ``path`` with one line per object. Returns the line count."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with file_path.open("w", encoding="utf-8") as f:
        for obj in objects:
            f.write(json.dumps(obj, ensure_ascii=False) + "\n")
            written += 1
    return written
