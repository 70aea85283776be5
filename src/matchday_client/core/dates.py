"""Promotion of ISO date strings in decoded JSON to ``datetime`` values."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ISO_DATETIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}(?::?\d{2})?)?$"
)
# Offset without minutes, only when directly preceded by the seconds field.
_HOUR_ONLY_OFFSET = re.compile(r"(:\d{2})([+-])(\d{2})$")


def is_iso_date_string(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return bool(_ISO_DATE.match(value) or _ISO_DATETIME.match(value))


def normalize_iso_string(value: str) -> str:
    """Rewrite API-style timestamps into a form ``fromisoformat`` accepts."""

    normalized = value.replace(" ", "T", 1)
    return _HOUR_ONLY_OFFSET.sub(r"\1\2\3:00", normalized)


def parse_iso_string(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(normalize_iso_string(value))
    except ValueError:
        return None
    if _ISO_DATE.match(value):
        # Calendar dates are read as UTC midnight.
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def revive_dates(value: Any) -> Any:
    """Return ``value`` with every ISO date string replaced by a ``datetime``.

    Lists and dicts are rebuilt recursively with order and keys preserved.
    Strings that look like dates but do not parse are returned unchanged, as
    is anything that is not a str, list or dict.
    """

    if value is None:
        return None
    if isinstance(value, str):
        if not is_iso_date_string(value):
            return value
        parsed = parse_iso_string(value)
        return value if parsed is None else parsed
    if isinstance(value, list):
        return [revive_dates(item) for item in value]
    if isinstance(value, dict):
        return {key: revive_dates(item) for key, item in value.items()}
    return value


def to_iso_utc(value: datetime) -> str:
    """Render an aware ``datetime`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    rendered = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


__all__ = [
    "is_iso_date_string",
    "normalize_iso_string",
    "parse_iso_string",
    "revive_dates",
    "to_iso_utc",
]
