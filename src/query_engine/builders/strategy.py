"""
Operator dispatch.

Every :class:`FilterOperation` is implemented by one small
:class:`PredicateOperator` subclass.  A :class:`PredicateOperatorRegistry`
maps operations to operators; the default builder resolves the field and
hands the column to whichever operator the registry holds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import UnsupportedOperationError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ..models import FilterCriteria
    from ..operations import FilterOperation


class PredicateOperator(ABC):
    """Compiles one operation into a SQLAlchemy boolean clause."""

    operation: ClassVar[FilterOperation]

    @abstractmethod
    def apply(self, column: Any, criteria: FilterCriteria) -> ColumnElement[bool]:
        """
        Args:
            column: Column, instrumented attribute or expression the
                criterion's field path resolved to.
            criteria: The criterion, operands already cast by ``value_type``.
        """
        ...


class PredicateOperatorRegistry:
    """
    Operation to operator mapping.

    Registering an operator for an operation that is already present
    replaces it, which is how a built-in behaviour is overridden::

        registry = build_default_registry()
        registry.register(MyEqualsOperator())
        builder = DefaultPredicateBuilder(registry=registry)
    """

    def __init__(self, *operators: PredicateOperator) -> None:
        self._by_operation: dict[FilterOperation, PredicateOperator] = {}
        self.register(*operators)

    def register(self, *operators: PredicateOperator) -> None:
        for operator in operators:
            self._by_operation[operator.operation] = operator

    def unregister(self, operation: FilterOperation) -> None:
        self._by_operation.pop(operation, None)

    def get(self, operation: FilterOperation) -> PredicateOperator | None:
        return self._by_operation.get(operation)

    def copy(self) -> PredicateOperatorRegistry:
        return PredicateOperatorRegistry(*self._by_operation.values())

    @property
    def operations(self) -> frozenset[FilterOperation]:
        return frozenset(self._by_operation)

    def __contains__(self, operation: object) -> bool:
        return operation in self._by_operation

    def __iter__(self) -> Iterator[PredicateOperator]:
        return iter(self._by_operation.values())

    def __len__(self) -> int:
        return len(self._by_operation)

    def apply(
        self,
        operation: FilterOperation | None,
        column: Any,
        criteria: FilterCriteria,
    ) -> ColumnElement[bool]:
        """
        Dispatch to the operator registered for *operation*.

        Raises:
            UnsupportedOperationError: Nothing is registered for it.
        """
        operator = self._by_operation.get(operation) if operation is not None else None
        if operator is None:
            requested = getattr(operation, "value", str(operation))
            raise UnsupportedOperationError(
                requested, [op.value for op in self._by_operation]
            )
        return operator.apply(column, criteria)
