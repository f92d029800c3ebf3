"""Equality and ordered comparison operators."""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, cast

from ...operations import FilterOperation
from ..checks import require_orderable
from ..strategy import PredicateOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...models import FilterCriteria


class EqualsOperator(PredicateOperator):
    operation = FilterOperation.EQUALS

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        # A ``None`` value renders as IS NULL
        return cast("ColumnElement[bool]", op_module.eq(column, criteria.value))


class NotEqualsOperator(PredicateOperator):
    operation = FilterOperation.NOT_EQUALS

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", op_module.ne(column, criteria.value))


class _OrderedOperator(PredicateOperator):
    _compare: Any

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        value = require_orderable(self.operation, column, criteria.value)
        return cast("ColumnElement[bool]", type(self)._compare(column, value))


class GreaterThanOperator(_OrderedOperator):
    operation = FilterOperation.GREATER_THAN
    _compare = op_module.gt


class GreaterThanOrEqualOperator(_OrderedOperator):
    operation = FilterOperation.GREATER_THAN_OR_EQUAL
    _compare = op_module.ge


class LessThanOperator(_OrderedOperator):
    operation = FilterOperation.LESS_THAN
    _compare = op_module.lt


class LessThanOrEqualOperator(_OrderedOperator):
    operation = FilterOperation.LESS_THAN_OR_EQUAL
    _compare = op_module.le
