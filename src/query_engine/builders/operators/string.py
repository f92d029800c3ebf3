"""String matching operators: like, ilike, starts_with, ends_with, contains."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import func

from ...operations import FilterOperation
from ..checks import require_text
from ..strategy import PredicateOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...models import FilterCriteria


class LikeOperator(PredicateOperator):
    """
    ``%value%`` pattern match.

    Case-insensitive unless ``case_sensitive`` is set: both the column and
    the pattern are lower-cased.  Wildcards inside the value are kept, so
    callers may pass ``"J%n"``.
    """

    operation = FilterOperation.LIKE

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        text = require_text(self.operation, criteria.value)
        if criteria.case_sensitive:
            return cast("ColumnElement[bool]", column.like(f"%{text}%"))
        return cast(
            "ColumnElement[bool]", func.lower(column).like(f"%{text.lower()}%")
        )


class ILikeOperator(PredicateOperator):
    """``%value%`` pattern match, always case-insensitive."""

    operation = FilterOperation.ILIKE

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        text = require_text(self.operation, criteria.value)
        return cast("ColumnElement[bool]", column.ilike(f"%{text}%"))


class StartsWithOperator(PredicateOperator):
    operation = FilterOperation.STARTS_WITH

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        text = require_text(self.operation, criteria.value)
        if criteria.case_sensitive:
            return cast("ColumnElement[bool]", column.startswith(text, autoescape=True))
        return cast("ColumnElement[bool]", column.istartswith(text, autoescape=True))


class EndsWithOperator(PredicateOperator):
    operation = FilterOperation.ENDS_WITH

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        text = require_text(self.operation, criteria.value)
        if criteria.case_sensitive:
            return cast("ColumnElement[bool]", column.endswith(text, autoescape=True))
        return cast("ColumnElement[bool]", column.iendswith(text, autoescape=True))


class ContainsOperator(PredicateOperator):
    operation = FilterOperation.CONTAINS

    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        text = require_text(self.operation, criteria.value)
        if criteria.case_sensitive:
            return cast("ColumnElement[bool]", column.contains(text, autoescape=True))
        return cast("ColumnElement[bool]", column.icontains(text, autoescape=True))
