"""Query string serialization using bracket notation for nested values."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from urllib.parse import quote

from .dates import to_iso_utc


def camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def query_to_mapping(query: object) -> Mapping[str, object]:
    """Return ``query`` as a mapping keyed by API (camelCase) field names.

    Dataclass queries are converted field by field; mappings pass through.
    """

    if query is None:
        return {}
    if isinstance(query, Mapping):
        return query
    if is_dataclass(query) and not isinstance(query, type):
        return {camel_case(f.name): getattr(query, f.name) for f in fields(query)}
    raise TypeError("query must be a dataclass query or a Mapping")


def _format_scalar(value: object) -> str:
    if isinstance(value, Enum):
        return _format_scalar(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.isoformat(timespec="milliseconds")
        return to_iso_utc(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _flatten(prefix: str, value: object) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if is_dataclass(value) and not isinstance(value, type):
        value = query_to_mapping(value)
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{key}]", item)
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{prefix}[{index}]", item)
        return
    yield prefix, _format_scalar(value)


def iter_query_pairs(query: object) -> Iterator[tuple[str, str]]:
    for key, value in query_to_mapping(query).items():
        yield from _flatten(str(key), value)


def stringify_query(query: object) -> str:
    """Serialize ``query`` as ``a=1&season[0]=x&orderBy[date]=asc``.

    ``None`` values and empty collections are omitted. Values are
    percent-encoded; brackets in keys are kept literal.
    """

    return "&".join(
        f"{quote(key, safe='[]')}={quote(value, safe='')}"
        for key, value in iter_query_pairs(query)
    )


__all__ = [
    "camel_case",
    "query_to_mapping",
    "iter_query_pairs",
    "stringify_query",
]
