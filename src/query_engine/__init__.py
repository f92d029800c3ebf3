from .builders import (
    DEFAULT_REGISTRY,
    DefaultPredicateBuilder,
    PredicateBuilder,
    PredicateOperator,
    PredicateOperatorRegistry,
    build_default_registry,
)
from .engine import SpecificationEngine
from .exceptions import (
    ArityError,
    FieldNotQueryableError,
    FieldResolutionError,
    NoBuilderFoundError,
    RelationshipTraversalError,
    SpecificationBuildError,
    SpecificationError,
    TypeMismatchError,
    UnsupportedOperationError,
    UnsupportedTypeError,
)
from .hooks import HookResult, ResolutionContext, ResolutionHook
from .models import FilterCriteria, FilterGroup, SpecificationRequest
from .operations import FilterOperation
from .predicate import (
    AndPredicate,
    NotPredicate,
    OrPredicate,
    Predicate,
    UnrestrictedPredicate,
)
from .utils import cast_value

__all__ = [
    # Core types
    "FilterOperation",
    "FilterCriteria",
    "FilterGroup",
    "SpecificationRequest",
    # Predicates
    "Predicate",
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    "UnrestrictedPredicate",
    # Engine / builders
    "SpecificationEngine",
    "PredicateBuilder",
    "DefaultPredicateBuilder",
    "PredicateOperator",
    "PredicateOperatorRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    # Hooks
    "HookResult",
    "ResolutionContext",
    "ResolutionHook",
    # Exceptions
    "SpecificationError",
    "SpecificationBuildError",
    "NoBuilderFoundError",
    "FieldResolutionError",
    "RelationshipTraversalError",
    "FieldNotQueryableError",
    "TypeMismatchError",
    "ArityError",
    "UnsupportedTypeError",
    "UnsupportedOperationError",
    # Utilities
    "cast_value",
]
