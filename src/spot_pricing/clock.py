"""Timestamp helpers — parsing, timezone alignment and spans."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable

Clock = Callable[[], datetime]


def align(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """Make a naive/aware pair comparable.

    A naive timestamp is read as wall-clock time in the other one's zone.
    """
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    if a.tzinfo is None:
        return a.replace(tzinfo=b.tzinfo), b
    return a, b.replace(tzinfo=a.tzinfo)


def span(start: datetime, end: datetime) -> timedelta:
    start, end = align(start, end)
    return end - start


def parse_timestamp(value: Any) -> datetime | None:
    """ISO-8601 string or datetime → datetime; anything else → None."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
