"""
Default predicate builder covering every :class:`FilterOperation`.

Example::

    builder = DefaultPredicateBuilder()
    predicate = builder.build(
        FilterCriteria(
            field="profile.first_name",
            operation=FilterOperation.CONTAINS,
            value="John",
        )
    )
    users = session.scalars(select(User).where(predicate.to_expression(User)))

The returned predicate is lazy: the field path is resolved, the operation
dispatched and the negation applied when ``to_expression`` is called with
the root entity.  Any failure at that point is logged and re-raised as a
:class:`SpecificationBuildError` naming the field and operation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, false, func, not_

from ..exceptions import SpecificationBuildError
from ..hooks import ResolutionContext
from ..predicate import Predicate
from ..utils import cast_value
from .base import PredicateBuilder
from .operators import DEFAULT_REGISTRY
from .resolution import ResolvedPath, resolve_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..hooks import ResolutionHook
    from ..models import FilterCriteria
    from .strategy import PredicateOperatorRegistry

logger = logging.getLogger(__name__)


def _negate(
    expression: ColumnElement[bool], resolved: ResolvedPath
) -> ColumnElement[bool]:
    # A leaf compared with NULL is NULL under NOT as well; EXISTS never is
    if not resolved.hops:
        expression = func.coalesce(expression, false())
    return not_(expression)


class CriterionPredicate(Predicate):
    """Leaf predicate for a single criterion, rendered by its builder."""

    def __init__(
        self, criteria: FilterCriteria, builder: DefaultPredicateBuilder
    ) -> None:
        self.criteria = criteria
        self._builder = builder

    def to_expression(self, root: Any) -> ColumnElement[bool]:
        return self._builder.to_expression(root, self.criteria)

    def to_dict(self) -> dict[str, Any]:
        operation = self.criteria.operation
        data: dict[str, Any] = {
            "op": operation.value if operation is not None else None,
            "attr": self.criteria.field,
        }
        if self.criteria.values is not None:
            data["values"] = list(self.criteria.values)
        else:
            data["val"] = self.criteria.value
        if self.criteria.case_sensitive:
            data["case_sensitive"] = True
        if self.criteria.negate:
            data["negate"] = True
        return data


class DefaultPredicateBuilder(PredicateBuilder):
    """
    Builds SQLAlchemy-backed predicates for all built-in operations.

    Args:
        registry: Operator registry used for dispatch.  Falls back to
            ``DEFAULT_REGISTRY``.
        hooks: Optional :class:`ResolutionHook` callables consulted before
            the default mapper-based field resolution.
        delimiter: Separator between path segments.
    """

    def __init__(
        self,
        registry: PredicateOperatorRegistry | None = None,
        hooks: Sequence[ResolutionHook] | None = None,
        *,
        delimiter: str = ".",
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._hooks = tuple(hooks or ())
        self._delimiter = delimiter

    def supports(self, criteria: FilterCriteria) -> bool:
        return criteria.operation is not None

    def build(self, criteria: FilterCriteria) -> Predicate:
        return CriterionPredicate(criteria, self)

    def to_expression(self, root: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        """Render *criteria* against *root*; see the module docstring."""
        try:
            typed = self._cast_operands(criteria)
            resolved = self._resolve(root, typed)
            expression = self._registry.apply(typed.operation, resolved.column, typed)
            expression = resolved.wrap(expression)
            return _negate(expression, resolved) if typed.negate else expression
        except Exception as exc:
            logger.error(
                "Error building predicate for field: %s, operation: %s",
                criteria.field,
                getattr(criteria.operation, "value", None),
                exc_info=True,
            )
            raise SpecificationBuildError(
                f"Error building predicate for field: {criteria.field}",
                field=criteria.field,
                operation=criteria.operation,
            ) from exc

    # -- internals -----------------------------------------------------------

    @staticmethod
    def _cast_operands(criteria: FilterCriteria) -> FilterCriteria:
        if criteria.value_type is None:
            return criteria
        return criteria.model_copy(
            update={
                "value": cast_value(criteria.value, criteria.value_type),
                "values": (
                    cast_value(criteria.values, criteria.value_type)
                    if criteria.values is not None
                    else None
                ),
            }
        )

    def _resolve(self, root: Any, criteria: FilterCriteria) -> ResolvedPath:
        if self._hooks:
            ctx = ResolutionContext.from_field(
                criteria.field,
                root,
                delimiter=self._delimiter,
                operation=criteria.operation,
                value=criteria.value,
                values=criteria.values,
            )
            for hook in self._hooks:
                result = hook(ctx)
                if result.handled:
                    return ResolvedPath(column=result.value)
        return resolve_path(root, criteria.field, delimiter=self._delimiter)
