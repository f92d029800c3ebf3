"""Predicate builders and the operator strategies they dispatch to."""

from .base import PredicateBuilder
from .default import CriterionPredicate, DefaultPredicateBuilder
from .operators import DEFAULT_REGISTRY, build_default_registry
from .resolution import ResolvedPath, resolve_path
from .strategy import PredicateOperator, PredicateOperatorRegistry

__all__ = [
    "PredicateBuilder",
    "DefaultPredicateBuilder",
    "CriterionPredicate",
    "PredicateOperator",
    "PredicateOperatorRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "ResolvedPath",
    "resolve_path",
]
