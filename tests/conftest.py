"""Shared fixtures: an in-memory records backend served over httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from media_tracker.catalog.client import RecordsClient


class FakeBackend:
    """Minimal stand-in for the records API."""

    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.requests: list[tuple[str, str]] = []
        self._next_id = 1

    def add(self, **fields: Any) -> str:
        record_id = str(self._next_id)
        self._next_id += 1
        self.items[record_id] = {"id": record_id, **fields}
        return record_id

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        parts = request.url.path.rstrip("/").split("/")
        record_id = parts[3] if len(parts) > 3 else None

        if request.method == "GET" and record_id is None:
            return httpx.Response(200, json={"items": list(self.items.values())})
        if request.method == "POST" and record_id is None:
            new_id = self.add(**json.loads(request.content))
            return httpx.Response(201, json=self.items[new_id])
        if record_id not in self.items:
            return httpx.Response(404, json={"error": "Record not found."})
        if request.method == "PUT":
            self.items[record_id] = {"id": record_id, **json.loads(request.content)}
            return httpx.Response(200, json=self.items[record_id])
        if request.method == "DELETE":
            del self.items[record_id]
            return httpx.Response(204)
        return httpx.Response(405, json={"error": "Method not allowed."})

    def client(self) -> RecordsClient:
        return RecordsClient(
            base_url="http://backend.test",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def backend() -> FakeBackend:
    backend = FakeBackend()
    backend.add(
        title="Arrival", type="Movie", genre="Sci-Fi", year=2016, rating=8, status="Completed", notes=""
    )
    backend.add(
        title="Dune", type="Book", genre="Sci-Fi", year=1965, rating=None, status="Planned", notes=""
    )
    return backend
