# src/media_tracker/catalog/cli.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from media_tracker.analysis.stats import format_summary, get_genre_counts, summarize
from media_tracker.catalog.client import ApiError, RecordsClient
from media_tracker.catalog.forms import record_to_fields
from media_tracker.catalog.listing import ALL_STATUSES, format_table
from media_tracker.catalog.session import CatalogSession
from media_tracker.config import get_project_root
from media_tracker.domain.models import STATUSES, Record
from media_tracker.io.records_jsonl import (
    load_records_from_jsonl,
    save_records_to_jsonl,
)

logger = logging.getLogger(__name__)

_FIELD_OPTIONS = ("title", "type", "genre", "year", "rating", "status", "notes")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the media-tracker CLI. Returns the exit status."""
    args = _build_arg_parser().parse_args(argv)

    _configure_logging(verbose=args.verbose)

    try:
        if args.command == "stats" and args.input:
            return _cmd_stats_offline(Path(args.input), show_genres=args.genres)

        with RecordsClient(base_url=args.api_base) as client:
            session = CatalogSession(client)
            session.refresh()

            if args.command == "list":
                return _cmd_list(session, query=args.search, status=args.status)
            if args.command == "stats":
                return _print_stats(session.records, show_genres=args.genres)
            if args.command == "add":
                return _cmd_save(session, _fields_from_args(args, {}))
            if args.command == "edit":
                return _cmd_edit(session, args)
            if args.command == "delete":
                return _cmd_delete(session, args.id, assume_yes=args.yes)
            if args.command == "export":
                output = Path(args.output) if args.output else _default_snapshot_path()
                return _cmd_export(session, output)

            msg = f"Unknown command: {args.command}"
            raise ValueError(msg)
    except ApiError as exc:
        logger.error("Backend request failed: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Cannot run %s: %s", args.command, exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        return 1


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-tracker",
        description="Track movies, shows and books against a records backend.",
    )

    parser.add_argument(
        "--api-base",
        default=None,
        help="Backend URL (default: MEDIA_TRACKER_API_BASE or http://localhost:5000).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Sub-command to run.",
    )

    list_parser = subparsers.add_parser("list", help="List records.")
    list_parser.add_argument(
        "--search",
        default="",
        help="Only show records whose title contains this text.",
    )
    list_parser.add_argument(
        "--status",
        choices=[ALL_STATUSES, *STATUSES],
        default=ALL_STATUSES,
        help="Only show records with this status (default: %(default)s).",
    )

    stats_parser = subparsers.add_parser("stats", help="Show catalog statistics.")
    stats_parser.add_argument(
        "--input",
        default=None,
        help="Compute statistics from a JSONL snapshot instead of the backend.",
    )
    stats_parser.add_argument(
        "--genres",
        action="store_true",
        help="Also print the count of every genre.",
    )

    add_parser = subparsers.add_parser("add", help="Add a new record.")
    _add_field_arguments(add_parser)

    edit_parser = subparsers.add_parser(
        "edit",
        help="Edit a record. Options left out keep their current value.",
    )
    edit_parser.add_argument("id", help="ID of the record to edit.")
    _add_field_arguments(edit_parser)

    delete_parser = subparsers.add_parser("delete", help="Delete a record.")
    delete_parser.add_argument("id", help="ID of the record to delete.")
    delete_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not ask for confirmation.",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Write all records to a JSONL snapshot.",
    )
    export_parser.add_argument(
        "--output",
        default=None,
        help="Path to output JSONL file (default: <project root>/data/records.jsonl).",
    )

    return parser


def _add_field_arguments(parser: argparse.ArgumentParser) -> None:
    # Values stay raw text; parsing and validation happen in the session.
    for name in _FIELD_OPTIONS:
        parser.add_argument(f"--{name}", default=None)


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _default_snapshot_path() -> Path:
    return get_project_root() / "data" / "records.jsonl"


def _fields_from_args(
    args: argparse.Namespace,
    current: dict[str, str],
) -> dict[str, str]:
    fields = dict(current)
    for name in _FIELD_OPTIONS:
        value = getattr(args, name)
        if value is not None:
            fields[name] = value
    return fields


def _cmd_list(session: CatalogSession, *, query: str, status: str) -> int:
    for line in format_table(session.visible(query, status)):
        print(line)
    return 0


def _print_stats(records: list[Record], *, show_genres: bool) -> int:
    for line in format_summary(summarize(records)):
        print(line)
    if show_genres:
        print("Genres:")
        for genre, count in get_genre_counts(records):
            print(f"  {genre}: {count}")
    return 0


def _cmd_stats_offline(path: Path, *, show_genres: bool) -> int:
    if not path.exists():
        logger.error("Snapshot %s does not exist.", path)
        return 1
    records = load_records_from_jsonl(path)
    logger.info("Loaded %s records from %s.", len(records), path)
    return _print_stats(records, show_genres=show_genres)


def _cmd_save(session: CatalogSession, fields: dict[str, str]) -> int:
    errors = session.submit(fields)
    if errors:
        print(" ".join(errors), file=sys.stderr)
        return 1
    logger.info("Saved. Catalog now holds %s records.", len(session.records))
    return 0


def _cmd_edit(session: CatalogSession, args: argparse.Namespace) -> int:
    record = session.find(args.id)
    if record is None:
        logger.error("No record with ID %s.", args.id)
        return 1
    return _cmd_save(session, _fields_from_args(args, record_to_fields(record)))


def _cmd_delete(session: CatalogSession, record_id: str, *, assume_yes: bool) -> int:
    record = session.find(record_id)
    if record is None:
        logger.error("No record with ID %s.", record_id)
        return 1

    if not assume_yes:
        try:
            answer = input(f'Delete "{record.title}"? This cannot be undone. [y/N] ')
        except EOFError:
            answer = ""
        if answer.strip().lower() not in {"y", "yes"}:
            logger.info("Nothing deleted.")
            return 0

    session.delete(record_id)
    return 0


def _cmd_export(session: CatalogSession, output_path: Path) -> int:
    written = save_records_to_jsonl(session.records, output_path)
    logger.info("Wrote %s records to %s.", written, output_path)
    return 0


if __name__ == "__main__":
    # python -m media_tracker.catalog.cli -v list --status Completed
    # python -m media_tracker.catalog.cli stats --input data/records.jsonl
    sys.exit(main())
