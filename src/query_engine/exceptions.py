"""
Query engine exception hierarchy.

Every error derives from :class:`SpecificationError` and serialises to a
flat, JSON-friendly dict with ``to_dict()``; ``error`` holds a stable code.

Only :class:`SpecificationBuildError` (and :class:`NoBuilderFoundError`)
leave the engine and the builders.  The errors raised while resolving a
path or checking operands are chained to it as ``__cause__``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

_FIELD_PREVIEW = 15


class SpecificationError(Exception):
    """Base exception for all query engine errors."""

    #: Stable identifier for API responses; the class name when unset.
    code: str | None = None

    def details(self) -> dict[str, Any]:
        """Structured attributes merged into :meth:`to_dict`."""
        return {"message": str(self)}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code or type(self).__name__, **self.details()}


class FieldResolutionError(SpecificationError):
    """
    A segment of a field path does not exist on the entity reached so far.

    Close matches among the entity's attributes are offered as
    ``suggestions``::

        Unknown field 'adress' on ProfileRecord (path 'profile.adress.city').
        Did you mean: address?
        Available fields: address, address_id, bio, id
    """

    code = "FIELD_NOT_FOUND"

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        full_path: str | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = sorted(available_fields)
        self.full_path = full_path or invalid_field
        self.suggestions = get_close_matches(
            invalid_field, self.available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._describe())

    @property
    def field(self) -> str:
        return self.invalid_field

    def _describe(self) -> str:
        lines = [
            f"Unknown field '{self.invalid_field}' on {self.model_name} "
            f"(path '{self.full_path}')."
        ]
        if self.suggestions:
            lines.append(f"Did you mean: {', '.join(self.suggestions)}?")
        listing = ", ".join(self.available_fields[:_FIELD_PREVIEW])
        if len(self.available_fields) > _FIELD_PREVIEW:
            listing += ", ..."
        lines.append(f"Available fields: {listing}")
        return "\n".join(lines)

    def details(self) -> dict[str, Any]:
        return {
            "field": self.invalid_field,
            "model": self.model_name,
            "full_path": self.full_path,
            "suggestions": self.suggestions,
            "available_fields": self.available_fields,
        }


class RelationshipTraversalError(FieldResolutionError):
    """An intermediate path segment is a plain attribute, so it cannot be navigated."""

    code = "RELATIONSHIP_TRAVERSAL_ERROR"

    def _describe(self) -> str:
        return (
            f"Cannot navigate through '{self.invalid_field}' on {self.model_name}: "
            f"it is not a relationship (path '{self.full_path}')."
        )

    def details(self) -> dict[str, Any]:
        return {
            "field": self.invalid_field,
            "model": self.model_name,
            "full_path": self.full_path,
        }


class FieldNotQueryableError(FieldResolutionError):
    """The last path segment is a relationship rather than a comparable attribute."""

    code = "FIELD_NOT_QUERYABLE"

    def _describe(self) -> str:
        return (
            f"'{self.invalid_field}' on {self.model_name} is a relationship and "
            f"cannot be compared directly; select one of its attributes "
            f"(path '{self.full_path}')."
        )

    def details(self) -> dict[str, Any]:
        return {
            "field": self.invalid_field,
            "model": self.model_name,
            "full_path": self.full_path,
        }


class TypeMismatchError(SpecificationError):
    """The value cannot be ordered against the resolved field's type."""

    code = "TYPE_MISMATCH"

    def __init__(self, operation: str, value: Any, expected: str) -> None:
        self.operation = operation
        self.value = value
        self.expected = expected
        super().__init__(
            f"{operation} expects a value of type {expected}, "
            f"got {value!r} ({type(value).__name__})"
        )

    def details(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "value_type": type(self.value).__name__,
            "expected": self.expected,
        }


class ArityError(SpecificationError):
    """A multi-value operation received no list, or a list of the wrong length."""

    code = "ARITY_ERROR"

    def __init__(
        self, operation: str, expected: int | None, actual: int | None
    ) -> None:
        self.operation = operation
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = f"{operation} operation requires a list of values"
        else:
            message = f"{operation} operation requires exactly {expected} values"
        if actual is not None:
            message += f", got {actual}"
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "expected": self.expected,
            "actual": self.actual,
        }


class UnsupportedTypeError(SpecificationError):
    """A date operation received a value that is not date-like."""

    code = "UNSUPPORTED_TYPE"

    def __init__(self, operation: str, value: Any, supported: Sequence[str]) -> None:
        self.operation = operation
        self.value = value
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported date type for {operation}: {type(value).__name__}. "
            f"Supported: {', '.join(supported)}"
        )

    def details(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "value_type": type(self.value).__name__,
            "supported": list(self.supported),
        }


class UnsupportedOperationError(SpecificationError):
    """No operator strategy is registered for the requested operation."""

    code = "UNSUPPORTED_OPERATION"

    def __init__(self, operation: str, valid_operations: list[str]) -> None:
        self.operation = operation
        self.valid_operations = sorted(valid_operations)
        self.suggestions = get_close_matches(
            operation, self.valid_operations, n=3, cutoff=0.6
        )
        hint = ""
        if self.suggestions:
            hint = f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(f"Operation '{operation}' is not registered.{hint}")

    def details(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "suggestions": self.suggestions,
            "valid_operations": self.valid_operations,
        }


class SpecificationBuildError(SpecificationError):
    """
    Building the predicate for a single criterion failed.

    Carries the field and operation of the offending criterion; the
    original error is chained as ``__cause__`` and reported under
    ``cause`` by :meth:`to_dict`.
    """

    code = "SPECIFICATION_BUILD_ERROR"

    def __init__(self, message: str, field: str | None, operation: Any) -> None:
        self.field = field
        self.operation = operation
        super().__init__(message)

    def details(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "message": str(self),
            "field": self.field,
            "operation": getattr(self.operation, "value", self.operation),
        }
        cause = self.__cause__
        if isinstance(cause, SpecificationError):
            data["cause"] = cause.to_dict()
        elif cause is not None:
            data["cause"] = {"error": type(cause).__name__, "message": str(cause)}
        return data


class NoBuilderFoundError(SpecificationBuildError):
    """No registered builder claims support for a criterion."""

    code = "NO_BUILDER_FOUND"

    def __init__(self, field: str | None, operation: Any) -> None:
        name = getattr(operation, "value", operation)
        super().__init__(
            f"No builder found for operation: {name}",
            field=field,
            operation=operation,
        )
