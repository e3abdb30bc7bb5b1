# media_tracker/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

from os import getenv
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

DEFAULT_API_BASE = "http://localhost:5000"
DEFAULT_TIMEOUT = 10.0


def get_project_root() -> Path:
    """Return the project root directory.

    Prefers MEDIA_TRACKER_PROJECT_ROOT env var. Falls back to current working directory.
    """
    if root := getenv("MEDIA_TRACKER_PROJECT_ROOT"):
        return Path(root).resolve()
    return Path.cwd()


def get_api_base() -> str:
    """Return the records backend URL without a trailing slash."""
    return getenv("MEDIA_TRACKER_API_BASE", DEFAULT_API_BASE).rstrip("/")


def get_timeout() -> float:
    """Return the HTTP timeout in seconds (MEDIA_TRACKER_TIMEOUT)."""
    raw = getenv("MEDIA_TRACKER_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        msg = f"MEDIA_TRACKER_TIMEOUT must be a number, got {raw!r}."
        raise ValueError(msg) from None
