"""Null check operators: is_null, is_not_null."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from ...operations import FilterOperation
from ..strategy import PredicateOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...models import FilterCriteria


class IsNullOperator(PredicateOperator):
    operation = FilterOperation.IS_NULL

    def apply(self, column: Any, _criteria: FilterCriteria) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.is_(None))


class IsNotNullOperator(PredicateOperator):
    operation = FilterOperation.IS_NOT_NULL

    def apply(self, column: Any, _criteria: FilterCriteria) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.is_not(None))
