from __future__ import annotations

from enum import Enum


class FilterOperation(str, Enum):
    """Supported filter operations."""

    # Equality / comparison
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"

    # String matching
    LIKE = "like"
    ILIKE = "ilike"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    CONTAINS = "contains"

    # Membership
    IN = "in"
    NOT_IN = "not_in"

    # Null checks
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"

    # Range
    BETWEEN = "between"

    # Dates
    DATE_EQUALS = "date_equals"
    DATE_BEFORE = "date_before"
    DATE_AFTER = "date_after"
    DATE_BETWEEN = "date_between"

    @classmethod
    def _missing_(cls, value: object) -> FilterOperation | None:
        # Accept member names ("NOT_EQUALS") as well as values ("not_equals").
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


#: Operations that read ``FilterCriteria.values``.
MULTI_VALUE_OPERATIONS: frozenset[FilterOperation] = frozenset(
    {
        FilterOperation.IN,
        FilterOperation.NOT_IN,
        FilterOperation.BETWEEN,
        FilterOperation.DATE_BETWEEN,
    }
)

#: Operations that read neither ``value`` nor ``values``.
NULL_OPERATIONS: frozenset[FilterOperation] = frozenset(
    {FilterOperation.IS_NULL, FilterOperation.IS_NOT_NULL}
)

#: Operations that read ``FilterCriteria.value``.
SINGLE_VALUE_OPERATIONS: frozenset[FilterOperation] = frozenset(
    set(FilterOperation) - MULTI_VALUE_OPERATIONS - NULL_OPERATIONS
)

#: Operations whose value(s) must be date-like.
DATE_OPERATIONS: frozenset[FilterOperation] = frozenset(
    {
        FilterOperation.DATE_EQUALS,
        FilterOperation.DATE_BEFORE,
        FilterOperation.DATE_AFTER,
        FilterOperation.DATE_BETWEEN,
    }
)
