"""Operand validation shared by the operator strategies."""

from __future__ import annotations

import datetime
import decimal
import time
from typing import Any

from ..exceptions import ArityError, TypeMismatchError, UnsupportedTypeError
from ..operations import FilterOperation

_NUMERIC_TYPES = (int, float, decimal.Decimal)

SUPPORTED_DATE_TYPES = ("date", "datetime", "struct_time")


def column_python_type(column: Any) -> type | None:
    """Return the Python type behind *column*, or ``None`` if unknown."""
    sql_type = getattr(column, "type", None)
    if sql_type is None:
        return None
    try:
        return sql_type.python_type
    except NotImplementedError:
        return None


def _is_numeric(tp_or_value: Any, *, is_type: bool) -> bool:
    if is_type:
        return issubclass(tp_or_value, _NUMERIC_TYPES) and not issubclass(
            tp_or_value, bool
        )
    return isinstance(tp_or_value, _NUMERIC_TYPES) and not isinstance(
        tp_or_value, bool
    )


def require_orderable(operation: FilterOperation, column: Any, value: Any) -> Any:
    """
    Ensure *value* can be ordered against *column*.

    Numbers compare with any numeric column; everything else must be an
    instance of the column's Python type.  Columns that expose no Python
    type (custom types, untyped expressions) are not checked.
    """
    expected = column_python_type(column)
    expected_name = expected.__name__ if expected is not None else "unknown"
    if value is None:
        raise TypeMismatchError(operation.name, value, expected_name)
    if expected is None:
        return value
    if _is_numeric(expected, is_type=True):
        if _is_numeric(value, is_type=False):
            return value
        raise TypeMismatchError(operation.name, value, expected_name)
    if not isinstance(value, expected):
        raise TypeMismatchError(operation.name, value, expected_name)
    return value


def require_text(operation: FilterOperation, value: Any) -> str:
    """String-matching operations need a value to build the pattern from."""
    if value is None:
        raise TypeMismatchError(operation.name, value, "str")
    return str(value)


def require_values(operation: FilterOperation, values: list[Any] | None) -> list[Any]:
    if values is None:
        raise ArityError(operation.name, expected=None, actual=None)
    return list(values)


def require_pair(
    operation: FilterOperation, values: list[Any] | None
) -> tuple[Any, Any]:
    """Range operations need exactly ``[lower, upper]`` (both inclusive)."""
    if values is None or len(values) != 2:
        raise ArityError(
            operation.name,
            expected=2,
            actual=None if values is None else len(values),
        )
    return values[0], values[1]


def coerce_date(operation: FilterOperation, value: Any) -> datetime.date:
    """
    Normalise a date-like operand.

    ``datetime`` and ``date`` are used as-is; a ``time.struct_time`` is
    converted to a naive ``datetime``.
    """
    if isinstance(value, datetime.datetime | datetime.date):
        return value
    if isinstance(value, time.struct_time):
        return datetime.datetime(*value[:6])
    raise UnsupportedTypeError(operation.name, value, SUPPORTED_DATE_TYPES)
