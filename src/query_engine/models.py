"""
Request records: criteria, groups and the top-level specification request.

The records are mutable pydantic models so that callers may build them
incrementally before handing them to the engine.  Field names are
snake_case; camelCase aliases (``caseSensitive``, ``filterGroups``,
``useAndOperatorForGroups`` …) are accepted when validating payloads.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .operations import FilterOperation


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )


class FilterCriteria(_RequestModel):
    """
    A single filterable condition.

    Attributes:
        field: Dot-separated navigation path (``"profile.address.city"``).
        operation: The operation to apply.  ``None`` is accepted so that
            builders can decline the criterion.
        value: Operand of single-value operations.
        values: Operands of ``IN``, ``NOT_IN``, ``BETWEEN`` and
            ``DATE_BETWEEN``.
        case_sensitive: Exact-case matching for string operations.
        negate: Wrap the resulting predicate in a logical NOT.
        value_type: Optional cast hint for ``value``/``values``
            (see :func:`query_engine.utils.cast_value`).
    """

    field: str
    operation: FilterOperation | None = None
    value: Any = None
    values: list[Any] | None = None
    case_sensitive: bool = False
    negate: bool = False
    value_type: str | None = None


class FilterGroup(_RequestModel):
    """Ordered criteria combined by a single logical operator (AND by default)."""

    filters: list[FilterCriteria] = Field(default_factory=list)
    use_and_operator: bool = True

    def add_filter(self, criteria: FilterCriteria | dict[str, Any]) -> FilterGroup:
        self.filters.append(FilterCriteria.model_validate(criteria))
        return self


class SpecificationRequest(_RequestModel):
    """
    Top-level filter request.

    ``filters`` are folded with ``use_and_operator``; each group is folded
    with its own operator and the group results are folded with
    ``use_and_operator_for_groups``.  Both default to AND.
    """

    filters: list[FilterCriteria] = Field(default_factory=list)
    use_and_operator: bool = True
    filter_groups: list[FilterGroup] = Field(default_factory=list)
    use_and_operator_for_groups: bool = True

    def add_filter(
        self, criteria: FilterCriteria | dict[str, Any]
    ) -> SpecificationRequest:
        """Append a single criterion, validating a raw mapping first."""
        self.filters.append(FilterCriteria.model_validate(criteria))
        return self

    def add_filters(
        self, criteria: Iterable[FilterCriteria | dict[str, Any]]
    ) -> SpecificationRequest:
        """Append several criteria, preserving their order."""
        self.filters.extend(FilterCriteria.model_validate(item) for item in criteria)
        return self

    def add_filter_group(
        self, group: FilterGroup | dict[str, Any]
    ) -> SpecificationRequest:
        """Append a filter group."""
        self.filter_groups.append(FilterGroup.model_validate(group))
        return self

    @property
    def is_empty(self) -> bool:
        return not self.filters and not self.filter_groups
