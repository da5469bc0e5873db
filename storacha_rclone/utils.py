from __future__ import annotations
"""Formatting helpers for command output and local file naming."""
from .errors import UsageError
from .models import ObjectEntry

SIZE_COLUMN_WIDTH = 12


def derive_destination(key: str) -> str:
    """Return the local filename for ``key``: everything after the last ``/``."""

    name = key.rsplit("/", 1)[-1]
    if not name:
        raise UsageError(f"cannot derive a file name from key {key!r}; pass --out")
    return name


def format_listing_line(entry: ObjectEntry) -> str:
    return f"{entry.size:>{SIZE_COLUMN_WIDTH}}  {entry.key}"
