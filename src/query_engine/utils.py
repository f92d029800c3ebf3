"""
Value casting for filter criteria.

Requests that arrive over a text transport (query strings, JSON) carry
dates, numbers and identifiers as strings.  ``FilterCriteria.value_type``
names the intended Python type and :func:`cast_value` converts the
criterion's value(s) before the operator is applied.
"""

from __future__ import annotations

import datetime
import decimal
import uuid
from collections.abc import Callable
from typing import Any

_UTC = datetime.timezone.utc


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.lower() in ("true", "1", "yes")
    return bool(raw)


def _to_date(raw: Any) -> datetime.date:
    if isinstance(raw, datetime.datetime):
        return raw.date()
    if isinstance(raw, datetime.date):
        return raw
    return datetime.datetime.fromisoformat(str(raw)).date()


def _parse_datetime(text: str) -> datetime.datetime:
    # fromisoformat only learned the "Z" suffix in 3.11
    parsed = datetime.datetime.fromisoformat(text.replace("Z", "+00:00"))
    return parsed.astimezone(_UTC) if parsed.tzinfo is not None else parsed


def _to_datetime(raw: Any) -> datetime.datetime:
    if isinstance(raw, datetime.datetime):
        return raw
    return _parse_datetime(str(raw))


def _to_time(raw: Any) -> datetime.time:
    if isinstance(raw, datetime.time):
        return raw
    return datetime.time.fromisoformat(str(raw))


def _to_uuid(raw: Any) -> uuid.UUID:
    if isinstance(raw, uuid.UUID):
        return raw
    return uuid.UUID(str(raw))


def _infer(raw: Any) -> Any:
    """Guess the type of a string: number, boolean, date, datetime or UUID."""
    if not isinstance(raw, str) or not raw.strip():
        return raw
    text = raw.strip()
    if text.lower() in ("true", "false"):
        return text.lower() == "true"

    # A bare date is also a valid datetime, so dates are tried first
    parsers: tuple[Callable[[str], Any], ...] = (
        int,
        float,
        datetime.date.fromisoformat,
        _parse_datetime,
        uuid.UUID,
    )
    for parse in parsers:
        try:
            return parse(text)
        except ValueError:
            continue
    return raw


_CASTERS: dict[str, Callable[[Any], Any]] = {
    "str": str,
    "string": str,
    "text": str,
    "int": int,
    "integer": int,
    "smallinteger": int,
    "biginteger": int,
    "float": float,
    "double": float,
    "decimal": lambda raw: decimal.Decimal(str(raw)),
    "numeric": lambda raw: decimal.Decimal(str(raw)),
    "bool": _to_bool,
    "boolean": _to_bool,
    "date": _to_date,
    "datetime": _to_datetime,
    "time": _to_time,
    "uuid": _to_uuid,
    "auto": _infer,
}


def cast_value(value: Any, value_type: str | None = None) -> Any:
    """
    Cast *value* to the Python type named by *value_type*.

    Lists and tuples are cast item by item (and returned as lists).
    ``None`` values, a missing *value_type* and unknown type names leave
    the value untouched.  A value that fails to convert is also returned
    unchanged so the operator can report the mismatch with full context.

    Known type names (case-insensitive): ``str``, ``string``, ``text``,
    ``int``, ``integer``, ``smallinteger``, ``biginteger``, ``float``,
    ``double``, ``decimal``, ``numeric``, ``bool``, ``boolean``, ``date``,
    ``datetime``, ``time``, ``uuid`` and ``auto`` (inferred from the text).
    """
    if isinstance(value, list | tuple):
        return [cast_value(item, value_type) for item in value]
    if value is None or value_type is None:
        return value

    caster = _CASTERS.get(value_type.lower())
    if caster is None:
        return value
    try:
        return caster(value)
    except (ValueError, TypeError, decimal.InvalidOperation):
        return value
