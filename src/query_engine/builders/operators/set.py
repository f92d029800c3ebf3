"""Membership and range operators: in, not_in, between."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import not_

from ...operations import FilterOperation
from ..checks import require_orderable, require_pair, require_values
from ..strategy import PredicateOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...models import FilterCriteria


class InOperator(PredicateOperator):
    operation = FilterOperation.IN

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        values = require_values(self.operation, criteria.values)
        return cast("ColumnElement[bool]", column.in_(values))


class NotInOperator(PredicateOperator):
    operation = FilterOperation.NOT_IN

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        values = require_values(self.operation, criteria.values)
        return not_(column.in_(values))


class BetweenOperator(PredicateOperator):
    """Inclusive range; ``values[0]`` is the lower bound, bounds are never swapped."""

    operation = FilterOperation.BETWEEN

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        lower, upper = require_pair(self.operation, criteria.values)
        require_orderable(self.operation, column, lower)
        require_orderable(self.operation, column, upper)
        return cast("ColumnElement[bool]", column.between(lower, upper))
