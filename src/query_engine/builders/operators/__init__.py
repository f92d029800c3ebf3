"""
Operator implementations and default registry.

Usage::

    from query_engine.builders.operators import DEFAULT_REGISTRY

    expr = DEFAULT_REGISTRY.apply(FilterOperation.EQUALS, User.status, criteria)
"""

from __future__ import annotations

from ..strategy import PredicateOperatorRegistry
from .date import (
    DateAfterOperator,
    DateBeforeOperator,
    DateBetweenOperator,
    DateEqualsOperator,
)
from .null import IsNotNullOperator, IsNullOperator
from .set import BetweenOperator, InOperator, NotInOperator
from .standard import (
    EqualsOperator,
    GreaterThanOperator,
    GreaterThanOrEqualOperator,
    LessThanOperator,
    LessThanOrEqualOperator,
    NotEqualsOperator,
)
from .string import (
    ContainsOperator,
    EndsWithOperator,
    ILikeOperator,
    LikeOperator,
    StartsWithOperator,
)


def build_default_registry() -> PredicateOperatorRegistry:
    """Create a registry holding every built-in operation."""
    return PredicateOperatorRegistry(
        # Equality / comparison
        EqualsOperator(),
        NotEqualsOperator(),
        GreaterThanOperator(),
        GreaterThanOrEqualOperator(),
        LessThanOperator(),
        LessThanOrEqualOperator(),
        # String
        LikeOperator(),
        ILikeOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        ContainsOperator(),
        # Membership / range
        InOperator(),
        NotInOperator(),
        BetweenOperator(),
        # Null
        IsNullOperator(),
        IsNotNullOperator(),
        # Dates
        DateEqualsOperator(),
        DateBeforeOperator(),
        DateAfterOperator(),
        DateBetweenOperator(),
    )


DEFAULT_REGISTRY: PredicateOperatorRegistry = build_default_registry()

__all__ = [
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "PredicateOperatorRegistry",
]
