"""
Composable predicate values.

A :class:`Predicate` describes "given a root entity, produce a boolean
condition".  It is built once and rendered on demand with
:meth:`Predicate.to_expression`; the result is a SQLAlchemy
``ColumnElement[bool]`` that can be passed to ``Select.where()``.

Predicates compose with ``&``, ``|`` and ``~``::

    active = engine.create_simple_specification("status", "ACTIVE")
    adults = engine.create_single_specification(
        FilterCriteria(field="age", operation=FilterOperation.GREATER_THAN, value=17)
    )
    stmt = select(User).where((active & ~adults).to_expression(User))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import ColumnElement, and_, not_, or_, true


class Predicate(ABC):
    """Base class for predicates with logical operator support."""

    @abstractmethod
    def to_expression(self, root: Any) -> ColumnElement[bool]:
        """
        Render the predicate against *root*.

        Args:
            root: A mapped class (or aliased entity) the field paths are
                resolved from.

        Returns:
            A SQLAlchemy boolean expression.  Nothing is executed.
        """
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly description of the predicate tree."""
        ...

    def __and__(self, other: Predicate) -> AndPredicate:
        return AndPredicate(self, other)

    def __or__(self, other: Predicate) -> OrPredicate:
        return OrPredicate(self, other)

    def __invert__(self) -> NotPredicate:
        return NotPredicate(self)

    @staticmethod
    def unrestricted() -> UnrestrictedPredicate:
        """The neutral predicate: matches every row."""
        return UnrestrictedPredicate()


class UnrestrictedPredicate(Predicate):
    """Match-all predicate, the identity of AND."""

    def to_expression(self, root: Any) -> ColumnElement[bool]:
        return true()

    def to_dict(self) -> dict[str, Any]:
        return {"op": "unrestricted"}


class AndPredicate(Predicate):
    """Logical AND composite predicate."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = predicates

    def to_expression(self, root: Any) -> ColumnElement[bool]:
        return and_(*(p.to_expression(root) for p in self.predicates))

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [p.to_dict() for p in self.predicates],
        }


class OrPredicate(Predicate):
    """Logical OR composite predicate."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = predicates

    def to_expression(self, root: Any) -> ColumnElement[bool]:
        return or_(*(p.to_expression(root) for p in self.predicates))

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "or",
            "conditions": [p.to_dict() for p in self.predicates],
        }


class NotPredicate(Predicate):
    """Logical NOT composite predicate."""

    def __init__(self, predicate: Predicate) -> None:
        self.predicate = predicate

    def to_expression(self, root: Any) -> ColumnElement[bool]:
        return not_(self.predicate.to_expression(root))

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [self.predicate.to_dict()],
        }
