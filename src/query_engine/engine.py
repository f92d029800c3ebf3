"""
Specification engine: turns a :class:`SpecificationRequest` into one
composed :class:`Predicate`.

Combination rules:

- ``filters`` are folded left to right with ``use_and_operator``.
- each group folds its own ``filters`` with its own ``use_and_operator``;
  the group predicates are then folded with ``use_and_operator_for_groups``.
- the filters predicate and the groups predicate are joined with the
  *groups* operator; when there are no filters the groups predicate is
  the result.
- an empty request yields the unrestricted (match-all) predicate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .builders.default import DefaultPredicateBuilder
from .exceptions import NoBuilderFoundError
from .models import FilterCriteria
from .operations import FilterOperation
from .predicate import Predicate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .builders.base import PredicateBuilder
    from .models import FilterGroup, SpecificationRequest

logger = logging.getLogger(__name__)


class SpecificationEngine:
    """
    Builds predicates from filter requests.

    Args:
        builders: Builders consulted in order for every criterion; the
            first whose ``supports()`` returns ``True`` is used.  Defaults
            to a single :class:`DefaultPredicateBuilder`.
    """

    def __init__(self, builders: Sequence[PredicateBuilder] | None = None) -> None:
        self._builders: tuple[PredicateBuilder, ...] = (
            tuple(builders) if builders is not None else (DefaultPredicateBuilder(),)
        )

    @property
    def builders(self) -> tuple[PredicateBuilder, ...]:
        return self._builders

    def create_specification(self, request: SpecificationRequest) -> Predicate:
        """Build the combined predicate for *request*."""
        logger.debug(
            "Creating specification for request with %d filters and %d groups",
            len(request.filters),
            len(request.filter_groups),
        )
        specification: Predicate = Predicate.unrestricted()

        if request.filters:
            filters_spec = self.create_specification_from_filters(
                request.filters, request.use_and_operator
            )
            specification = specification & filters_spec

        if request.filter_groups:
            groups_spec = self.create_specification_from_groups(
                request.filter_groups, request.use_and_operator_for_groups
            )
            if not request.filters:
                specification = groups_spec
            elif request.use_and_operator_for_groups:
                specification = specification & groups_spec
            else:
                specification = specification | groups_spec

        return specification

    def create_specification_from_filters(
        self, filters: Sequence[FilterCriteria], use_and: bool = True
    ) -> Predicate:
        """Fold *filters* left to right with AND (or OR when ``use_and`` is false)."""
        if not filters:
            return Predicate.unrestricted()
        specification = self.create_single_specification(filters[0])
        for criteria in filters[1:]:
            next_spec = self.create_single_specification(criteria)
            specification = (
                specification & next_spec if use_and else specification | next_spec
            )
        return specification

    def create_specification_from_groups(
        self, groups: Sequence[FilterGroup], use_and: bool = True
    ) -> Predicate:
        """Fold each group with its own operator, then fold the groups."""
        if not groups:
            return Predicate.unrestricted()
        specification = self.create_specification_from_filters(
            groups[0].filters, groups[0].use_and_operator
        )
        for group in groups[1:]:
            next_spec = self.create_specification_from_filters(
                group.filters, group.use_and_operator
            )
            specification = (
                specification & next_spec if use_and else specification | next_spec
            )
        return specification

    def create_single_specification(self, criteria: FilterCriteria) -> Predicate:
        """
        Build the predicate for one criterion with the first supporting builder.

        Raises:
            NoBuilderFoundError: If no builder supports the criterion.
        """
        logger.debug(
            "Creating specification for field: %s, operation: %s",
            criteria.field,
            getattr(criteria.operation, "value", None),
        )
        for builder in self._builders:
            if builder.supports(criteria):
                return builder.build(criteria)
        raise NoBuilderFoundError(criteria.field, criteria.operation)

    def create_simple_specification(self, field: str, value: Any) -> Predicate:
        """Shortcut for a single ``field == value`` criterion."""
        criteria = FilterCriteria(
            field=field, operation=FilterOperation.EQUALS, value=value
        )
        return self.create_single_specification(criteria)
