"""
Shortcut constructors for criteria, groups and requests.

Example::

    request = create_group_request(
        True,
        create_or_group(like("first_name", "John"), like("last_name", "John")),
        create_and_group(equals("is_active", True)),
    )
    predicate = engine.create_specification(request)
"""

from __future__ import annotations

from typing import Any

from .models import FilterCriteria, FilterGroup, SpecificationRequest
from .operations import FilterOperation


def create_filter(
    field: str,
    operation: FilterOperation,
    value: Any = None,
    *,
    values: list[Any] | None = None,
    case_sensitive: bool = False,
    negate: bool = False,
) -> FilterCriteria:
    """Build a criterion: ``value`` for single operands, ``values`` for lists."""
    return FilterCriteria(
        field=field,
        operation=operation,
        value=value,
        values=values,
        case_sensitive=case_sensitive,
        negate=negate,
    )


def equals(field: str, value: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.EQUALS, value)


def not_equals(field: str, value: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.NOT_EQUALS, value)


def greater_than(field: str, value: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.GREATER_THAN, value)


def greater_than_or_equal(field: str, value: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.GREATER_THAN_OR_EQUAL, value)


def less_than(field: str, value: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.LESS_THAN, value)


def less_than_or_equal(field: str, value: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.LESS_THAN_OR_EQUAL, value)


def like(field: str, value: str) -> FilterCriteria:
    return create_filter(field, FilterOperation.LIKE, value)


def ilike(field: str, value: str) -> FilterCriteria:
    return create_filter(field, FilterOperation.ILIKE, value)


def contains(field: str, value: str, *, case_sensitive: bool = False) -> FilterCriteria:
    return create_filter(
        field, FilterOperation.CONTAINS, value, case_sensitive=case_sensitive
    )


def starts_with(
    field: str, value: str, *, case_sensitive: bool = False
) -> FilterCriteria:
    return create_filter(
        field, FilterOperation.STARTS_WITH, value, case_sensitive=case_sensitive
    )


def ends_with(
    field: str, value: str, *, case_sensitive: bool = False
) -> FilterCriteria:
    return create_filter(
        field, FilterOperation.ENDS_WITH, value, case_sensitive=case_sensitive
    )


def in_(field: str, *values: Any) -> FilterCriteria:
    """``field IN (values...)``; the trailing underscore avoids the keyword."""
    return create_filter(field, FilterOperation.IN, values=list(values))


def not_in(field: str, *values: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.NOT_IN, values=list(values))


def between(field: str, lower: Any, upper: Any) -> FilterCriteria:
    """Inclusive range; bounds are used in the given order."""
    return create_filter(field, FilterOperation.BETWEEN, values=[lower, upper])


def date_between(field: str, lower: Any, upper: Any) -> FilterCriteria:
    return create_filter(field, FilterOperation.DATE_BETWEEN, values=[lower, upper])


def is_null(field: str) -> FilterCriteria:
    return create_filter(field, FilterOperation.IS_NULL)


def is_not_null(field: str) -> FilterCriteria:
    return create_filter(field, FilterOperation.IS_NOT_NULL)


def create_and_request(*filters: FilterCriteria) -> SpecificationRequest:
    return SpecificationRequest(filters=list(filters), use_and_operator=True)


def create_or_request(*filters: FilterCriteria) -> SpecificationRequest:
    return SpecificationRequest(filters=list(filters), use_and_operator=False)


def create_and_group(*filters: FilterCriteria) -> FilterGroup:
    return FilterGroup(filters=list(filters), use_and_operator=True)


def create_or_group(*filters: FilterCriteria) -> FilterGroup:
    return FilterGroup(filters=list(filters), use_and_operator=False)


def create_group_request(
    use_and_for_groups: bool, *groups: FilterGroup
) -> SpecificationRequest:
    return SpecificationRequest(
        filter_groups=list(groups),
        use_and_operator_for_groups=use_and_for_groups,
    )
