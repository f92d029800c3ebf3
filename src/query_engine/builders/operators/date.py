"""
Date operators: date_equals, date_before, date_after, date_between.

The operand is dispatched on its runtime type (``datetime``, ``date`` or
``time.struct_time``) and compared against the column as-is; no
truncation of the column is performed.
"""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, cast

from ...operations import FilterOperation
from ..checks import coerce_date, require_pair
from ..strategy import PredicateOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...models import FilterCriteria


class _DateComparisonOperator(PredicateOperator):
    _compare: Any

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        value = coerce_date(self.operation, criteria.value)
        return cast("ColumnElement[bool]", type(self)._compare(column, value))


class DateEqualsOperator(_DateComparisonOperator):
    operation = FilterOperation.DATE_EQUALS
    _compare = op_module.eq


class DateBeforeOperator(_DateComparisonOperator):
    operation = FilterOperation.DATE_BEFORE
    _compare = op_module.lt


class DateAfterOperator(_DateComparisonOperator):
    operation = FilterOperation.DATE_AFTER
    _compare = op_module.gt


class DateBetweenOperator(PredicateOperator):
    operation = FilterOperation.DATE_BETWEEN

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        lower, upper = require_pair(self.operation, criteria.values)
        lower = coerce_date(self.operation, lower)
        upper = coerce_date(self.operation, upper)
        return cast("ColumnElement[bool]", column.between(lower, upper))
