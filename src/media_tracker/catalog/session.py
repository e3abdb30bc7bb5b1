# src/media_tracker/catalog/session.py

from __future__ import annotations

import logging
from collections.abc import Mapping

from media_tracker.analysis.stats import summarize
from media_tracker.catalog.client import ApiError, RecordsClient
from media_tracker.catalog.forms import parse_form
from media_tracker.catalog.listing import ALL_STATUSES, filter_records
from media_tracker.domain.models import Record, StatsSummary
from media_tracker.domain.validation import validate

logger = logging.getLogger(__name__)


class CatalogSession:
    """Holds the current record list and routes edits through validation.

    The record list is only ever replaced wholesale from the backend, so
    statistics are always computed over what the server last returned.
    """

    def __init__(self, client: RecordsClient) -> None:
        self._client = client
        self.records: list[Record] = []

    def refresh(self) -> list[Record]:
        """Reload the record list from the backend."""
        self.records = self._client.list_records()
        logger.info("Loaded %s records.", len(self.records))
        return self.records

    def visible(self, query: str = "", status: str = ALL_STATUSES) -> list[Record]:
        return filter_records(self.records, query, status)

    def stats(self) -> StatsSummary:
        return summarize(self.records)

    def find(self, record_id: str) -> Record | None:
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def submit(self, fields: Mapping[str, str | None]) -> list[str]:
        """Validate and save a form submission.

        Returns the messages to show the user; an empty list means the
        record was saved and the list refreshed. Nothing is sent to the
        backend when validation fails.
        """
        candidate = parse_form(fields)
        errors = validate(candidate)
        if errors:
            logger.debug("Rejected candidate %r: %s", candidate.title, errors)
            return errors

        try:
            if candidate.id:
                self._client.update_record(candidate.id, candidate)
                logger.info("Updated record %s.", candidate.id)
            else:
                self._client.create_record(candidate)
                logger.info("Created record %r.", candidate.title)
            self.refresh()
        except ApiError as exc:
            return [str(exc)]
        return []

    def delete(self, record_id: str) -> None:
        """Delete a record and reload. Raises ApiError on failure."""
        self._client.delete_record(record_id)
        logger.info("Deleted record %s.", record_id)
        self.refresh()
