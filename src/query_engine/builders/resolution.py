"""
Field-path resolution against SQLAlchemy mappers.

A path such as ``"profile.address.city"`` is walked one segment at a
time: every segment but the last must be a relationship of the current
entity, the last one a column (or column-like ORM descriptor such as a
hybrid property).  The first segment that does not fit stops the walk
with a :class:`FieldResolutionError`.

Relationship hops are rendered as correlated ``EXISTS`` subqueries
(``has()`` for scalar relationships, ``any()`` for collections), nested
from the leaf outwards, so negating the final predicate yields its exact
complement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

from sqlalchemy import ColumnElement
from sqlalchemy import inspect as sa_inspect

from ..exceptions import (
    FieldNotQueryableError,
    FieldResolutionError,
    RelationshipTraversalError,
)


@dataclass(frozen=True)
class ResolvedPath:
    """
    Outcome of resolving a field path.

    Attributes:
        column: The leaf column/expression the operation applies to.
        hops: Relationship attributes traversed to reach it, root first.
    """

    column: Any
    hops: tuple[Any, ...] = ()

    def wrap(self, expression: ColumnElement[bool]) -> ColumnElement[bool]:
        """Nest *expression* inside the relationship hops."""
        for hop in reversed(self.hops):
            if hop.property.uselist:
                expression = cast("ColumnElement[bool]", hop.any(expression))
            else:
                expression = cast("ColumnElement[bool]", hop.has(expression))
        return expression


def _available_fields(mapper: Any) -> list[str]:
    return [
        key for key in mapper.all_orm_descriptors.keys() if not key.startswith("__")
    ]


def resolve_path(root: Any, field_path: str, *, delimiter: str = ".") -> ResolvedPath:
    """
    Resolve *field_path* starting from the mapped entity *root*.

    Raises:
        FieldResolutionError: A segment is empty or unknown.
        RelationshipTraversalError: A non-final segment is not a relationship.
        FieldNotQueryableError: The final segment is a relationship.
    """
    parts = field_path.split(delimiter)
    current = root
    hops: list[Any] = []

    for index, part in enumerate(parts):
        mapper = sa_inspect(current).mapper
        model_name = mapper.class_.__name__
        available = _available_fields(mapper)
        is_last = index == len(parts) - 1

        if not part or part not in available:
            raise FieldResolutionError(
                part, model_name, available, full_path=field_path
            )

        is_relationship = part in mapper.relationships
        if is_last:
            if is_relationship:
                raise FieldNotQueryableError(
                    part, model_name, available, full_path=field_path
                )
            return ResolvedPath(column=getattr(current, part), hops=tuple(hops))

        if not is_relationship:
            raise RelationshipTraversalError(
                part, model_name, available, full_path=field_path
            )
        hops.append(getattr(current, part))
        current = mapper.relationships[part].mapper.class_

    # split() always yields at least one part
    raise AssertionError("unreachable")  # pragma: no cover
