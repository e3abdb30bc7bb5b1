# src/media_tracker/catalog/client.py

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from media_tracker.config import get_api_base, get_timeout
from media_tracker.domain.models import Record
from media_tracker.io.records_jsonl import record_to_payload, records_from_response

logger = logging.getLogger(__name__)

RECORDS_PATH = "/api/records"


class ApiError(RuntimeError):
    """Raised when the records backend rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecordsClient:
    """HTTP client for the records backend."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or get_api_base()).rstrip("/")

        self._client = httpx.Client(
            base_url=self._base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout if timeout is not None else get_timeout(),
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "RecordsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    def list_records(self) -> list[Record]:
        """Fetch the full record collection."""
        data = self._request("GET", RECORDS_PATH)
        records = records_from_response(data)
        logger.debug("Fetched %s records from %s.", len(records), self._base_url)
        return records

    def create_record(self, record: Record) -> Any:
        """Create a new record. Returns the decoded response body."""
        return self._request("POST", RECORDS_PATH, json=record_to_payload(record))

    def update_record(self, record_id: str, record: Record) -> Any:
        """Replace the record stored under ``record_id``."""
        return self._request(
            "PUT",
            f"{RECORDS_PATH}/{quote(str(record_id), safe='')}",
            json=record_to_payload(record),
        )

    def delete_record(self, record_id: str) -> Any:
        """Delete the record stored under ``record_id``."""
        return self._request(
            "DELETE",
            f"{RECORDS_PATH}/{quote(str(record_id), safe='')}",
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiError(f"Request failed ({exc})") from exc

        data = _decode_body(response)

        if not response.is_success:
            message = _error_message(data, response.status_code)
            logger.warning(
                "%s %s rejected (status=%s): %s",
                method,
                path,
                response.status_code,
                message,
            )
            raise ApiError(message, status_code=response.status_code)

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return data


def _decode_body(response: httpx.Response) -> Any:
    """Decode JSON when the content type says so, else text. Failures give None."""
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            return response.json()
        except ValueError:
            return None
    try:
        return response.text
    except UnicodeDecodeError:
        return None


def _error_message(data: Any, status_code: int) -> str:
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return f"Request failed ({status_code})"
