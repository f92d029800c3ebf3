"""
Resolution hooks: let callers take over field-path resolution.

A hook can map a virtual field name to any SQLAlchemy expression (a
computed column, a JSON sub-key, a pre-joined alias).  Hooks run in order
before the default mapper-based resolution and the first one returning a
handled result supplies the column the operation is applied to::

    def full_name(ctx: ResolutionContext) -> HookResult:
        if ctx.field_path != "full_name":
            return HookResult.skip()
        return HookResult(ctx.root.first_name + " " + ctx.root.last_name)

    builder = DefaultPredicateBuilder(hooks=[full_name])
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class HookResult:
    """What a hook decided: a resolved ``value``, or ``handled=False`` to pass."""

    value: Any
    handled: bool = True

    @classmethod
    def skip(cls) -> HookResult:
        return cls(value=None, handled=False)


@dataclass(frozen=True)
class ResolutionContext:
    """
    Everything a hook may look at.

    Attributes:
        field_path: The path as written in the criterion.
        parts: ``field_path`` split on the builder's delimiter.
        root: Entity the predicate is being rendered against.
        operation: The criterion's operation.
        value: The criterion's single operand, after casting.
        values: The criterion's operand list, after casting.
    """

    field_path: str
    parts: tuple[str, ...]
    root: Any
    operation: Any = None
    value: Any = None
    values: list[Any] | None = None

    @property
    def is_nested(self) -> bool:
        return len(self.parts) > 1

    @property
    def leaf(self) -> str:
        """The last path segment, the attribute being compared."""
        return self.parts[-1]

    @classmethod
    def from_field(
        cls,
        field_path: str,
        root: Any,
        *,
        delimiter: str = ".",
        operation: Any = None,
        value: Any = None,
        values: list[Any] | None = None,
    ) -> ResolutionContext:
        return cls(
            field_path=field_path,
            parts=tuple(field_path.split(delimiter)),
            root=root,
            operation=operation,
            value=value,
            values=values,
        )


#: A hook receives the context and returns a :class:`HookResult`.
ResolutionHook: TypeAlias = Callable[[ResolutionContext], HookResult]
